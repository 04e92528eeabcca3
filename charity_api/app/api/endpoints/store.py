"""
Store-backed organization endpoints.

Read-only listing of the organizations kept in the SQLite store,
sorted by the database on the numeric funding column.
"""

import logging
import sqlite3
from typing import List

from fastapi import APIRouter, HTTPException, status

from charity_api.app.schemas.organization import StoreOrganizationRead
from charity_api.app.services.store_service import StoreOrganizationService

router = APIRouter()


@router.get("/organizations", response_model=List[StoreOrganizationRead])
async def list_store_organizations() -> List[StoreOrganizationRead]:
    """Return all stored organizations, lowest funding first."""
    try:
        return await StoreOrganizationService.list_sorted()
    except sqlite3.Error as e:
        logging.getLogger(__name__).exception("Failed to read organizations from the store")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load organizations",
        ) from e
