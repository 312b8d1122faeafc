"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one group of
operations.  The routers are aggregated in ``router.py`` and mounted
under ``/api`` by the application factory.
"""
