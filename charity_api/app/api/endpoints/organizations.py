"""
Organization endpoints.

These routes expose the JSON-document-backed CRUD API for orphanages
and old age homes.  The two listing routes keep the paths the donor
frontend already calls: ``/organizations`` for orphanages and
``/organizations1`` for old age homes, both sorted by funding with the
least funded organization first.  The ``{org_type}`` path segment must
be ``orphanage`` or ``oldage``; anything else is answered with 400,
before the request body is looked at.

Stored records are returned exactly as they are in the document,
including fields this API does not know about and ``null`` values.
"""

from typing import Any, Dict, List, Optional, Type, TypeVar

from fastapi import APIRouter, Body, HTTPException, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from charity_api.app.schemas.organization import FundingUpdate, OrganizationCreate, OrganizationType
from charity_api.app.services.organization_service import (
    InvalidOrganizationTypeError,
    OrganizationNotFoundError,
    OrganizationService,
    PersistenceError,
    resolve_category,
)

router = APIRouter()

ModelT = TypeVar("ModelT", bound=BaseModel)


def _to_http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, InvalidOrganizationTypeError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, OrganizationNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


def _parse_body(model: Type[ModelT], payload: Optional[Dict[str, Any]]) -> ModelT:
    """Validate a raw JSON body, reporting errors the way FastAPI does (422)."""
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        errors = [{**err, "loc": ("body", *err["loc"])} for err in e.errors(include_url=False)]
        raise RequestValidationError(errors, body=payload) from e


@router.get("/organizations")
async def list_orphanages() -> List[Dict[str, Any]]:
    """Return all orphanages sorted by funding amount, lowest first."""
    return await OrganizationService.list_sorted(OrganizationType.ORPHANAGE)


@router.get("/organizations1")
async def list_oldage_homes() -> List[Dict[str, Any]]:
    """Return all old age homes sorted by funding amount, lowest first."""
    return await OrganizationService.list_sorted(OrganizationType.OLDAGE)


@router.get("/organization/{org_type}/{org_id}")
async def get_organization(org_type: str, org_id: int) -> Dict[str, Any]:
    """Retrieve a single organization.

    Returns HTTP 400 for an unknown organization type and 404 if no
    organization with this id exists in the category.
    """
    try:
        return await OrganizationService.get_organization(org_type, org_id)
    except (InvalidOrganizationTypeError, OrganizationNotFoundError) as e:
        raise _to_http_error(e) from e


@router.post(
    "/organization/{org_type}",
    status_code=status.HTTP_201_CREATED,
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": OrganizationCreate.model_json_schema()}}}},
)
async def create_organization(org_type: str, payload: Optional[Dict[str, Any]] = Body(None)) -> Dict[str, Any]:
    """Create an organization in the given category.

    The id is assigned by the server as one more than the highest id
    in the category.
    """
    try:
        resolve_category(org_type)
        org_in = _parse_body(OrganizationCreate, payload)
        return await OrganizationService.create_organization(org_type, org_in)
    except (InvalidOrganizationTypeError, PersistenceError) as e:
        raise _to_http_error(e) from e


@router.put(
    "/organization/{org_type}/{org_id}/funding",
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": FundingUpdate.model_json_schema()}}}},
)
async def update_funding(org_type: str, org_id: int, payload: Optional[Dict[str, Any]] = Body(None)) -> Dict[str, Any]:
    """Overwrite the funding amount of an organization."""
    try:
        resolve_category(org_type)
        funding = _parse_body(FundingUpdate, payload)
        return await OrganizationService.update_funding(org_type, org_id, funding.fund_amount)
    except (InvalidOrganizationTypeError, OrganizationNotFoundError, PersistenceError) as e:
        raise _to_http_error(e) from e


@router.delete("/organization/{org_type}/{org_id}")
async def delete_organization(org_type: str, org_id: int) -> Dict[str, Any]:
    """Delete an organization and return the removed record."""
    try:
        deleted = await OrganizationService.delete_organization(org_type, org_id)
    except (InvalidOrganizationTypeError, OrganizationNotFoundError, PersistenceError) as e:
        raise _to_http_error(e) from e
    return {"message": "Organization deleted successfully", "organization": deleted}
