"""Schema descriptions handed to the host for the provider, resources and data sources."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class SchemaAttribute(BaseModel):
    """One field of a provider, resource or data source schema."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str = Field("string", description="string, bool, list or map")
    element_type: Optional[str] = Field(None, description="Element type for list and map fields")
    description: str = ""
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    default: Optional[Any] = None
    use_state_for_unknown: bool = Field(
        False, description="Plan modifier keeping the prior state value while unknown"
    )


class Schema(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str = ""
    attributes: tuple[SchemaAttribute, ...] = ()

    def attribute(self, name: str) -> Optional[SchemaAttribute]:
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
