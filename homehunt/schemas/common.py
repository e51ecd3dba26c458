"""
Shared schema building blocks.
Payloads use camelCase keys on the wire; snake_case is accepted on input too.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from uuid import UUID


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class InsertResponse(CamelModel):
    """Result of a single insert."""

    success: bool = True
    message: str = Field(..., description="Human-readable outcome")
    inserted_id: UUID = Field(..., description="Generated identifier of the new record")


class MessageResponse(CamelModel):
    """Result of an update or delete."""

    success: bool = True
    message: str
    id: Optional[UUID] = None
