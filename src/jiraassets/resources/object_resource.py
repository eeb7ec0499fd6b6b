"""The jiraassets_object resource: lifecycle of one Assets object."""

from typing import Optional

from jiraassets.exceptions import (
    CodecError,
    ResourceOperationError,
    SchemaResolutionError,
)
from jiraassets.models.assets import AssetObject, ObjectPayload, ObjectType
from jiraassets.models.resource import ObjectResourceModel
from jiraassets.models.schema import Schema, SchemaAttribute
from jiraassets.providers.assets.codec import DecodeMode
from jiraassets.resources.base import BaseResource

ATTRIBUTES_SETTING_ERROR = "Error during object attributes setting"


class ObjectResource(BaseResource):
    """
    Maps create/read/update/delete/import onto the Assets object endpoints.

    Models passed in are never modified; every operation returns a new model,
    built only after the remote call succeeded.

    Update semantics: the Assets API merges attributes partially. Attributes
    removed from the plan are left untouched on the remote object and are not
    cleared by the provider.
    """

    type_name = "jiraassets_object"

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description="A Jira Assets object resource.",
            attributes=(
                SchemaAttribute(
                    name="workspace_id",
                    computed=True,
                    use_state_for_unknown=True,
                    description="The ID of the workspace the object belongs to.",
                ),
                SchemaAttribute(
                    name="global_id",
                    computed=True,
                    use_state_for_unknown=True,
                    description="The global ID of the object.",
                ),
                SchemaAttribute(
                    name="id",
                    computed=True,
                    use_state_for_unknown=True,
                    description="The ID of the object.",
                ),
                SchemaAttribute(
                    name="label",
                    computed=True,
                    use_state_for_unknown=True,
                    description=(
                        "The name of the object. This value is fetched from the attribute that "
                        "is currently marked as label for the object type of this object"
                    ),
                ),
                SchemaAttribute(
                    name="object_key",
                    computed=True,
                    use_state_for_unknown=True,
                    description="The external identifier for this object",
                ),
                SchemaAttribute(name="type", required=True, description="Name of the object type."),
                SchemaAttribute(
                    name="attributes",
                    type="map",
                    element_type="string",
                    required=True,
                    description="Key value pairs of the attributes of the object",
                ),
                SchemaAttribute(name="created", computed=True, use_state_for_unknown=True),
                SchemaAttribute(name="updated", computed=True),
                SchemaAttribute(
                    name="has_avatar", type="bool", optional=True, computed=True, default=False
                ),
                SchemaAttribute(
                    name="avatar_uuid",
                    optional=True,
                    description="The UUID as retrieved by uploading an avatar.",
                ),
            ),
        )

    # Helpers

    def _require(self, model: ObjectResourceModel, *fields: str) -> None:
        for name in fields:
            if getattr(model, name) is None:
                raise ResourceOperationError(
                    "Missing required argument",
                    f'The argument "{name}" is required, but no definition was found.',
                    attribute=name,
                )

    def _resolve_object_type(self, name: str) -> ObjectType:
        object_type = self.context.schema_cache.resolve_object_type(name)
        if object_type is None:
            raise SchemaResolutionError(
                f"object type {name!r} does not exist in object schema "
                f"{self.context.object_schema_id!r}",
                attribute="type",
            )
        return object_type

    def _build_payload(self, plan: ObjectResourceModel) -> ObjectPayload:
        """Encode the plan client-side; nothing is sent if any attribute fails."""
        try:
            object_type = self._resolve_object_type(plan.type)
            attributes = self.context.codec.encode_all(plan.attributes, object_type.name)
        except (SchemaResolutionError, CodecError) as e:
            self._logger.error(ATTRIBUTES_SETTING_ERROR, error=e.message, attribute=e.attribute)
            raise

        return ObjectPayload(
            object_type_id=object_type.id,
            attributes=attributes,
            has_avatar=plan.has_avatar,
            avatar_uuid=plan.avatar_uuid or None,
        )

    @staticmethod
    def _computed_fields(obj: AssetObject) -> dict:
        return {
            "workspace_id": obj.workspace_id,
            "global_id": obj.global_id,
            "id": obj.id,
            "label": obj.label,
            "object_key": obj.object_key,
            "created": obj.created,
            "updated": obj.updated,
            "has_avatar": obj.has_avatar,
        }

    def _decode_attributes(self, object_id: str) -> dict[str, str]:
        records = self._call_remote(
            "Error during object attributes reading", self.client.get_object_attributes, object_id
        )
        ignore_keys = self.context.ignore_keys
        strict = self.context.decode_mode == DecodeMode.STRICT

        attributes: dict[str, str] = {}
        for record in records:
            if record.name in ignore_keys:
                continue
            try:
                attributes[record.name] = self.context.codec.decode(record)
            except CodecError as e:
                if strict:
                    raise
                self._logger.warning(
                    "Attribute value could not be decoded, keeping empty value",
                    object_id=object_id,
                    attribute=record.name,
                    error=e.message,
                )
                attributes[record.name] = ""
        return attributes

    # Lifecycle

    def create(self, plan: ObjectResourceModel) -> ObjectResourceModel:
        """Create the object and return the state with computed fields filled in."""
        self._require(plan, "type", "attributes")
        payload = self._build_payload(plan)

        obj = self._call_remote("Error during object creation", self.client.create_object, payload)
        self._logger.info("Object created", id=obj.id, object_key=obj.object_key, type=plan.type)
        return plan.model_copy(update=self._computed_fields(obj))

    def read(self, state: ObjectResourceModel) -> ObjectResourceModel:
        """
        Refresh state from the API.

        The attribute map is rebuilt from scratch; reserved and ignored
        attribute names are left out.
        """
        self._require(state, "id")
        obj = self._call_remote("Error during object reading", self.client.get_object, state.id)
        attributes = self._decode_attributes(state.id)

        update = self._computed_fields(obj)
        update["attributes"] = attributes
        update["type"] = obj.object_type_name
        return state.model_copy(update=update)

    def update(
        self, plan: ObjectResourceModel, state: Optional[ObjectResourceModel] = None
    ) -> ObjectResourceModel:
        """
        Overwrite the attributes present in the plan.

        Only the planned attributes are sent; attributes missing from the plan
        keep their remote value.
        """
        if plan.id is None and state is not None:
            plan = plan.model_copy(update={"id": state.id})
        self._require(plan, "id", "type", "attributes")
        payload = self._build_payload(plan)

        self._logger.info("Updating object", id=plan.id)
        obj = self._call_remote(
            "Error during object update", self.client.update_object, plan.id, payload
        )
        return plan.model_copy(update=self._computed_fields(obj))

    def delete(self, state: ObjectResourceModel) -> None:
        self._require(state, "id")
        self._call_remote("Error during object deletion", self.client.delete_object, state.id)
        self._logger.info("Object deleted", id=state.id)

    def import_state(self, external_id: str) -> ObjectResourceModel:
        """Seed state with the object ID only; the next read fills in the rest."""
        if not external_id:
            raise ResourceOperationError(
                "Missing import identifier", "An object ID is required to import an object."
            )
        return ObjectResourceModel(id=external_id)

