"""Cache data models for gitreview.

Contains the Pydantic model persisted for each cached review:
- CacheEntry: Review text plus the configuration it was produced under
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CacheEntry(BaseModel):
    """A cached review and the metadata used to validate it.

    Serialized with camelCase field names (``modelId``) so entries match
    the on-disk format: version, modelId, template, focus, ignore, review.
    """

    model_config = ConfigDict(populate_by_name=True)

    version: str
    model_id: str = Field(alias="modelId")
    template: str
    focus: Optional[list[str]] = None
    ignore: Optional[list[str]] = None
    review: str

    def to_record(self) -> dict:
        """Return the entry as a JSON-ready dict using on-disk field names."""
        return self.model_dump(by_alias=True)
