"""
Endpoint subpackage for API v1.

Each module in this package defines an APIRouter for one entity kind
(vessels, crew, maintenance, bookings, inventory), for the analytics
reports or for the info/health routes.  The routers are aggregated in
``router.py`` at the package level and then included in the main
application.
"""
