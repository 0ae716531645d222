from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class ListItem(BaseModel):
    """
    A single todo entry.

    Fields:
    - id: Opaque identifier, unique by convention (not enforced)
    - text: Display text
    - checked: Completion flag

    Instances are frozen; a checked-state change replaces the record with a
    copy. The persisted form uses the aliases `_id`, `_item` and `_checked`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default="", alias="_id")
    text: str = Field(default="", alias="_item")
    checked: bool = Field(default=False, alias="_checked")

    def to_record(self) -> dict:
        """Return the persisted `{_id, _item, _checked}` record."""
        return self.model_dump(by_alias=True)

    def toggled(self) -> "ListItem":
        """Return a copy with the checked flag flipped."""
        return self.model_copy(update={"checked": not self.checked})
