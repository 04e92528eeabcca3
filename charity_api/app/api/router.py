"""
Top-level API router.

Aggregates the resource routers.  The whole router is mounted under
``/api`` by ``main.create_app``.
"""

from fastapi import APIRouter

from .endpoints import health, organizations, store

router = APIRouter()

# The organization router defines its own paths (``/organizations``,
# ``/organization/{org_type}/...``) so it is included without a prefix.
router.include_router(organizations.router, tags=["organizations"])
router.include_router(health.router, tags=["health"])
router.include_router(store.router, prefix="/store", tags=["store"])
