"""The jiraassets_objectschema data source: object types and attributes of a schema."""

from collections.abc import Mapping
from typing import Any, Optional

from jiraassets.exceptions import ProviderInitializationError, ResourceOperationError
from jiraassets.models.schema import Schema, SchemaAttribute
from jiraassets.providers.assets.schema_cache import SchemaCache
from jiraassets.resources.base import BaseResource

READ_ERROR = "Error during object schema reading"


class ObjectSchemaDataSource(BaseResource):
    """Exposes the object types of a schema, with their attribute names and IDs."""

    type_name = "jiraassets_objectschema"

    @classmethod
    def schema(cls) -> Schema:
        return Schema(
            description="Object types and attributes of a Jira Assets object schema.",
            attributes=(
                SchemaAttribute(
                    name="id",
                    optional=True,
                    computed=True,
                    description="ID of the object schema; defaults to the provider's object_schema_id.",
                ),
                SchemaAttribute(name="name", computed=True, description="Name of the object schema."),
                SchemaAttribute(
                    name="object_types",
                    type="list",
                    element_type="object",
                    computed=True,
                    description="Object types with their id, name and attributes.",
                ),
            ),
        )

    def _schema_cache(self, schema_id: str) -> SchemaCache:
        if schema_id == self.context.object_schema_id:
            return self.context.schema_cache
        try:
            return SchemaCache.build(self.client, schema_id)
        except ProviderInitializationError as e:
            raise ResourceOperationError(READ_ERROR, e.message, cause=e) from e

    def read(self, config: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """
        Read an object schema.

        Args:
            config: Data source arguments; only "id" is used

        Returns:
            dict: {"id", "name", "object_types": [{"id", "name", "attributes": [...]}]}
        """
        schema_id = (config or {}).get("id") or self.context.object_schema_id
        if not schema_id:
            raise ResourceOperationError(
                "Missing object schema ID",
                "Set id on the data source or object_schema_id on the provider.",
                attribute="id",
            )

        object_schema = self._call_remote(READ_ERROR, self.client.get_object_schema, schema_id)
        cache = self._schema_cache(schema_id)

        return {
            "id": object_schema.id,
            "name": object_schema.name,
            "object_types": [
                {
                    "id": object_type.id,
                    "name": object_type.name,
                    "attributes": [
                        {"id": attr.id, "name": attr.name, "type": attr.type}
                        for attr in cache.attributes_for(object_type.id)
                    ],
                }
                for object_type in cache.object_types
            ],
        }
