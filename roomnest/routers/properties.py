"""
Property endpoints
"""
from fastapi import APIRouter, Depends, status
from roomnest.core.dependencies import get_property_service, require_owner
from roomnest.models import Property, User
from roomnest.schemas import PropertyCreate, PropertyOut, PropertyPatch
from roomnest.services import PropertyService

router = APIRouter(prefix="/properties", tags=["properties"])


def property_payload(prop: Property) -> dict:
    return PropertyOut.model_validate(prop).model_dump(mode="json")


@router.get("")
def list_properties(service: PropertyService = Depends(get_property_service)):
    """
    All listed properties, newest first
    """
    properties = service.list_properties()
    return {"success": True, "count": len(properties), "data": [property_payload(p) for p in properties]}


@router.get("/{property_id}")
def get_property(property_id: int, service: PropertyService = Depends(get_property_service)):
    return {"success": True, "data": property_payload(service.get_property(property_id))}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_property(
    payload: PropertyCreate,
    owner: User = Depends(require_owner),
    service: PropertyService = Depends(get_property_service)
):
    prop = service.create_property(owner, payload)
    return {"success": True, "message": "Property created successfully", "data": property_payload(prop)}


@router.put("/{property_id}")
def update_property(
    property_id: int,
    payload: PropertyPatch,
    owner: User = Depends(require_owner),
    service: PropertyService = Depends(get_property_service)
):
    """
    Partial update; fields left out of the body are not touched
    """
    prop = service.update_property(owner, property_id, payload)
    return {"success": True, "message": "Property updated successfully", "data": property_payload(prop)}


@router.delete("/{property_id}")
def delete_property(
    property_id: int,
    owner: User = Depends(require_owner),
    service: PropertyService = Depends(get_property_service)
):
    service.delete_property(owner, property_id)
    return {"success": True, "message": "Property deleted successfully", "data": {}}


@router.patch("/{property_id}/restore")
def restore_property(
    property_id: int,
    owner: User = Depends(require_owner),
    service: PropertyService = Depends(get_property_service)
):
    prop = service.restore_property(owner, property_id)
    return {"success": True, "message": "Property restored successfully", "data": property_payload(prop)}
