"""
Service layer abstraction.

Services encapsulate the fleet's business logic: validating payloads,
mutating the record stores, expanding vessels with their dependents
and computing analytics.  Endpoints stay thin and only translate
between HTTP and these services.
"""
