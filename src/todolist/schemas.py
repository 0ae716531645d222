from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import ListItem


# PUBLIC_INTERFACE
class ItemCreate(BaseModel):
    """
    Schema for adding a new item to the list.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "Buy milk",
                "checked": False,
            }
        }
    )

    text: str = Field(..., description="Display text of the item", min_length=1, max_length=200)
    checked: bool = Field(default=False, description="Completion flag")
    id: Optional[str] = Field(
        default=None,
        description="Explicit item id. When omitted the next id after the last item is used",
    )

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """
        Strip whitespace and enforce 1..200 length.
        """
        s = v.strip()
        if not (1 <= len(s) <= 200):
            raise ValueError("text length must be between 1 and 200 characters")
        return s


# PUBLIC_INTERFACE
class ItemOut(BaseModel):
    """
    Schema returned by the API for a list item.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"id": "1", "text": "Buy milk", "checked": False}}
    )

    id: str = Field(..., description="Identifier of the item")
    text: str = Field(..., description="Display text of the item")
    checked: bool = Field(..., description="Completion flag")

    @classmethod
    def from_item(cls, item: ListItem) -> "ItemOut":
        return cls(id=item.id, text=item.text, checked=item.checked)


# PUBLIC_INTERFACE
class ListOut(BaseModel):
    """
    The whole list in display order.
    """

    items: List[ItemOut] = Field(..., description="Items in insertion order")
    total: int = Field(..., description="Number of items in the list")
