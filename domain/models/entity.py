"""
Base class for persisted records.

Every record the object store keeps derives from Entity. The `id` is the
stable persistent identifier: it is generated once, survives a round trip
through the store, and is what selection sets and references are keyed by.
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field


def new_id() -> str:
    """Generate a new persistent identifier."""
    return str(uuid.uuid4())


class Entity(BaseModel):
    """
    A record with identity.

    Records are mutable: the store writes in-place field changes through on
    `save()`. Assignments are validated so that a bad mutation fails at the
    point it is made rather than when the store is flushed.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(
        default_factory=new_id,
        description="Unique identifier (UUID), assigned at creation",
    )
