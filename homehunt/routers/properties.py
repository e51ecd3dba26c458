"""
Property listing endpoints: creation by agents, public browsing, owner
edits and admin verification.
"""

from fastapi import APIRouter, Depends, status, Query, Path
from typing import List
from uuid import UUID

from homehunt.services.property import PropertyService
from homehunt.schemas.property import (
    PropertyCreate,
    PropertyUpdate,
    PropertyVerifyRequest,
    PropertyResponse
)
from homehunt.schemas.common import InsertResponse, MessageResponse
from homehunt.schemas.error import (
    get_public_error_responses,
    get_common_error_responses,
    get_workflow_error_responses
)
from homehunt.utils.auth import Identity
from homehunt.utils.dependencies import get_identity, get_property_service


router = APIRouter(prefix="/properties", tags=["Properties"])


@router.post(
    "",
    response_model=InsertResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create property",
    description="Create a listing owned by the calling agent. New listings start as pending.",
    responses=get_common_error_responses()
)
async def create_property(
    property_data: PropertyCreate,
    identity: Identity = Depends(get_identity),
    property_service: PropertyService = Depends(get_property_service)
) -> InsertResponse:
    property_obj = await property_service.create_property(property_data, identity)
    return InsertResponse(message="Property created", inserted_id=property_obj.id)


@router.get(
    "",
    response_model=List[PropertyResponse],
    summary="List all properties",
    description="Every listing regardless of verification status.",
    responses=get_common_error_responses()
)
async def list_properties(
    property_service: PropertyService = Depends(get_property_service)
) -> List[PropertyResponse]:
    properties = await property_service.list_all()
    return [PropertyResponse.model_validate(p) for p in properties]


@router.get(
    "/verified",
    response_model=List[PropertyResponse],
    summary="List verified properties",
    responses=get_public_error_responses()
)
async def list_verified_properties(
    property_service: PropertyService = Depends(get_property_service)
) -> List[PropertyResponse]:
    properties = await property_service.list_verified()
    return [PropertyResponse.model_validate(p) for p in properties]


@router.get(
    "/agent",
    response_model=List[PropertyResponse],
    summary="List an agent's properties",
    responses=get_common_error_responses()
)
async def list_agent_properties(
    email: str = Query(..., min_length=1, description="Agent email"),
    identity: Identity = Depends(get_identity),
    property_service: PropertyService = Depends(get_property_service)
) -> List[PropertyResponse]:
    properties = await property_service.list_by_agent(email, identity)
    return [PropertyResponse.model_validate(p) for p in properties]


@router.patch(
    "/verify/{property_id}",
    response_model=PropertyResponse,
    summary="Verify or reject property",
    description="Move a pending listing to 'verified' or 'rejected'.",
    responses=get_workflow_error_responses()
)
async def verify_property(
    verify_data: PropertyVerifyRequest,
    property_id: UUID = Path(..., description="Property ID"),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    property_obj = await property_service.verify_property(property_id, verify_data.status)
    return PropertyResponse.model_validate(property_obj)


@router.get(
    "/{property_id}",
    response_model=PropertyResponse,
    summary="Get property",
    responses=get_public_error_responses()
)
async def get_property(
    property_id: UUID = Path(..., description="Property ID"),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    property_obj = await property_service.get_property(property_id)
    return PropertyResponse.model_validate(property_obj)


@router.put(
    "/{property_id}",
    response_model=PropertyResponse,
    summary="Update property",
    description="Replace the editable fields of a listing. Rejected listings cannot be edited.",
    responses=get_common_error_responses()
)
async def update_property(
    property_data: PropertyUpdate,
    property_id: UUID = Path(..., description="Property ID"),
    identity: Identity = Depends(get_identity),
    property_service: PropertyService = Depends(get_property_service)
) -> PropertyResponse:
    property_obj = await property_service.update_property(property_id, property_data, identity)
    return PropertyResponse.model_validate(property_obj)


@router.delete(
    "/{property_id}",
    response_model=MessageResponse,
    summary="Delete property",
    responses=get_common_error_responses()
)
async def delete_property(
    property_id: UUID = Path(..., description="Property ID"),
    identity: Identity = Depends(get_identity),
    property_service: PropertyService = Depends(get_property_service)
) -> MessageResponse:
    await property_service.delete_property(property_id, identity)
    return MessageResponse(message="Property deleted", id=property_id)
