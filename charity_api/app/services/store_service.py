"""
Service layer for the SQLite-backed organization store.

The store keeps organizations in a single ``organizations`` table with a
numeric ``fund_amount`` column.  Over HTTP it is read-only: the only
exposed operation is the listing sorted by funding.  ``add_organization``
exists for the seeding script and the test-suite.
"""

import logging
from typing import List

from charity_api.app.core.db import get_connection
from charity_api.app.schemas.organization import StoreOrganizationRead


class StoreOrganizationService:
    """Read access to the organization store."""

    @classmethod
    async def list_sorted(cls) -> List[StoreOrganizationRead]:
        """Return all stored organizations, lowest funding first."""
        conn = get_connection()
        try:
            cursor = conn.cursor()
            rows = cursor.execute(
                "SELECT id, org_name, fund_amount FROM organizations ORDER BY fund_amount ASC, id ASC"
            ).fetchall()
            return [StoreOrganizationRead(**dict(row)) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def add_organization(cls, org_name: str, fund_amount: float) -> StoreOrganizationRead:
        """Insert an organization and return the stored row."""
        logger = logging.getLogger(__name__)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO organizations (org_name, fund_amount) VALUES (?, ?)",
                (org_name, fund_amount),
            )
            org_id = cursor.lastrowid
            conn.commit()
            logger.info("Added store organization %s", org_id)
            row = cursor.execute(
                "SELECT id, org_name, fund_amount FROM organizations WHERE id = ?",
                (org_id,),
            ).fetchone()
            return StoreOrganizationRead(**dict(row))
        finally:
            conn.close()
