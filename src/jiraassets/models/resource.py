"""State model of the jiraassets_object resource."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ObjectResourceModel(BaseModel):
    """
    Terraform plan/state of one Assets object.

    Attributes:
        workspace_id: Workspace the object belongs to (computed).
        global_id: Global identifier of the object (computed).
        id: Object ID (computed, or seeded by import).
        label: Value of the object type's label attribute (computed).
        object_key: External identifier, e.g. "ITSM-12" (computed).
        type: Object type name, e.g. "Host" (required).
        attributes: Attribute name to value map (required).
        created: Creation timestamp (computed).
        updated: Last update timestamp (computed).
        has_avatar: Whether the object has an avatar (defaults to False).
        avatar_uuid: UUID of a previously uploaded avatar.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    workspace_id: Optional[str] = None
    global_id: Optional[str] = None
    id: Optional[str] = None
    label: Optional[str] = None
    object_key: Optional[str] = None
    type: Optional[str] = None
    attributes: Optional[dict[str, str]] = None
    created: Optional[str] = None
    updated: Optional[str] = None
    has_avatar: bool = False
    avatar_uuid: Optional[str] = Field(None, description="The UUID as retrieved by uploading an avatar.")

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")
