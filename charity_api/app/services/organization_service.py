"""
Service layer for orphanages and old age homes.

This module provides the CRUD operations over the JSON organization
document: listing a category sorted by funding, fetching a single
organization, creating one, updating its funding amount and deleting
it.  Every call loads the document afresh through
``storage.document_session`` and, for mutations, writes the whole
document back before returning.

Errors are reported with exceptions which the API layer translates
into HTTP responses:

* ``InvalidOrganizationTypeError`` for a category token other than
  ``orphanage`` or ``oldage``.  It is raised before anything is read.
* ``OrganizationNotFoundError`` when no record has the requested id.
* ``PersistenceError`` when the updated document could not be saved.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from charity_api.app.core import storage
from charity_api.app.schemas.organization import FundAmount, OrganizationCreate, OrganizationType
from charity_api.app.services.funding import sort_by_funding

logger = logging.getLogger(__name__)

CATEGORY_KEYS: Dict[OrganizationType, str] = {
    OrganizationType.ORPHANAGE: storage.ORPHANAGES_KEY,
    OrganizationType.OLDAGE: storage.OLDAGE_HOMES_KEY,
}


class InvalidOrganizationTypeError(ValueError):
    """Raised for a category token outside the known organization types."""


class OrganizationNotFoundError(ValueError):
    """Raised when no organization with the given id exists in a category."""


class PersistenceError(RuntimeError):
    """Raised when the organization document could not be written."""


def resolve_category(org_type: str | OrganizationType) -> str:
    """Return the document key holding organizations of ``org_type``."""
    try:
        return CATEGORY_KEYS[OrganizationType(org_type)]
    except ValueError:
        raise InvalidOrganizationTypeError("Invalid organization type") from None


def next_id(organizations: List[Dict[str, Any]]) -> int:
    """Return the id for a new record: highest existing id plus one."""
    return max((org["id"] for org in organizations if isinstance(org.get("id"), int)), default=0) + 1


def _find_index(organizations: List[Dict[str, Any]], org_id: int) -> int:
    for index, org in enumerate(organizations):
        if org.get("id") == org_id:
            return index
    raise OrganizationNotFoundError("Organization not found")


class OrganizationService:
    """Service class for managing organizations stored in the JSON document."""

    @classmethod
    async def list_sorted(cls, org_type: str | OrganizationType) -> List[Dict[str, Any]]:
        """Return every organization of a category, lowest funding first."""
        key = resolve_category(org_type)
        with storage.document_session() as document:
            return sort_by_funding(document[key])

    @classmethod
    async def get_organization(cls, org_type: str | OrganizationType, org_id: int) -> Dict[str, Any]:
        """Retrieve a single organization by category and id."""
        key = resolve_category(org_type)
        with storage.document_session() as document:
            organizations = document[key]
            return organizations[_find_index(organizations, org_id)]

    @classmethod
    async def create_organization(cls, org_type: str | OrganizationType, data: OrganizationCreate) -> Dict[str, Any]:
        """Append a new organization to a category and return it.

        The id is assigned here; the remaining fields come from
        ``data``, omitting the ones the client left unset.
        """
        key = resolve_category(org_type)
        with storage.document_session() as document:
            organizations = document[key]
            new_org = {"id": next_id(organizations), **data.model_dump(exclude_none=True)}
            organizations.append(new_org)
            if not storage.save_document(document):
                raise PersistenceError("Failed to save organization")
        logger.info("Created %s %s", key, new_org["id"])
        return new_org

    @classmethod
    async def update_funding(
        cls,
        org_type: str | OrganizationType,
        org_id: int,
        fund_amount: FundAmount,
    ) -> Dict[str, Any]:
        """Replace the funding amount of one organization.

        The amount is stored exactly as given.  Returns the updated
        record.
        """
        key = resolve_category(org_type)
        with storage.document_session() as document:
            organizations = document[key]
            org = organizations[_find_index(organizations, org_id)]
            org["fund_amount"] = fund_amount
            if not storage.save_document(document):
                raise PersistenceError("Failed to update organization")
        logger.info("Updated funding of %s %s to %r", key, org_id, fund_amount)
        return org

    @classmethod
    async def delete_organization(cls, org_type: str | OrganizationType, org_id: int) -> Dict[str, Any]:
        """Remove one organization and return its last stored contents."""
        key = resolve_category(org_type)
        with storage.document_session() as document:
            organizations = document[key]
            deleted = organizations.pop(_find_index(organizations, org_id))
            if not storage.save_document(document):
                raise PersistenceError("Failed to delete organization")
        logger.info("Deleted %s %s", key, org_id)
        return deleted
