"""Wire models for the Assets object API.

Field names follow Python conventions; aliases carry the camelCase names the
API sends and expects. Unknown fields in responses are ignored.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AssetsModel(BaseModel):
    """Base class for API models: camelCase aliases, immutable after parsing."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
    )

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ObjectType(AssetsModel):
    id: str
    name: str
    object_schema_id: Optional[str] = None


class ObjectSchema(AssetsModel):
    id: str
    name: str
    object_schema_key: Optional[str] = None


class AttributeDefinition(AssetsModel):
    """Object type attribute as returned by the attributes listing."""

    id: str
    name: str
    type: int = 0
    object_type: Optional[ObjectType] = None

    @property
    def object_type_name(self) -> str:
        return self.object_type.name if self.object_type else ""


class StatusOption(AssetsModel):
    id: str
    name: str
    category: Optional[int] = None


class AttributeStatus(AssetsModel):
    id: str
    name: Optional[str] = None
    category: Optional[int] = None


class AttributeValue(AssetsModel):
    value: Optional[str] = None
    search_value: Optional[str] = None
    display_value: Optional[str] = None
    status: Optional[AttributeStatus] = None


class ObjectAttribute(AssetsModel):
    """One attribute record of an object, with its definition and values."""

    id: Optional[str] = None
    object_type_attribute_id: Optional[str] = None
    object_type_attribute: AttributeDefinition
    object_attribute_values: list[AttributeValue] = Field(default_factory=list)

    @property
    def name(self) -> str:
        return self.object_type_attribute.name


class AssetObject(AssetsModel):
    """An object as returned by create, get and update."""

    workspace_id: str = ""
    global_id: str = ""
    id: str
    label: str = ""
    object_key: str = ""
    created: str = ""
    updated: str = ""
    has_avatar: bool = False
    object_type: Optional[ObjectType] = None

    @property
    def object_type_name(self) -> str:
        return self.object_type.name if self.object_type else ""


class PayloadAttributeValue(AssetsModel):
    value: str


class PayloadAttribute(AssetsModel):
    object_type_attribute_id: str
    object_attribute_values: list[PayloadAttributeValue]

    @property
    def value(self) -> str:
        return self.object_attribute_values[0].value


class ObjectPayload(AssetsModel):
    """Request body for object create and update."""

    object_type_id: str
    attributes: list[PayloadAttribute] = Field(default_factory=list)
    has_avatar: bool = False
    avatar_uuid: Optional[str] = Field(None, alias="avatarUUID")
