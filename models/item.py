from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """Immutable inventory record. Stored by reference in both registry indexes."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique identifier within a registry")
    description: str = Field(..., description="Human readable description, defines listing order")
    location: str = Field(..., description="Free-form storage location")
