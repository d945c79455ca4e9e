"""
Pydantic schema definitions for API payloads.

Each entity kind (vessels, crew, maintenance, bookings, inventory)
defines a ``Create`` model holding its required fields and defaults
and an ``Update`` model where every field is optional.  The models are
the per-kind rule sets applied by ``services.validation``; stored
records themselves are plain dictionaries.
"""
