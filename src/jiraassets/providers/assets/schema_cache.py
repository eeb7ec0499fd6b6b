"""In-memory cache of the object types and attribute definitions of one object schema."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Optional

from jiraassets.exceptions import AssetsApiError, ProviderInitializationError
from jiraassets.helpers.logger import get_logger
from jiraassets.models.assets import AttributeDefinition, ObjectType
from jiraassets.providers.assets.client import AssetsClient

logger = get_logger(__name__)


class SchemaCache:
    """
    Object types and their attribute definitions, fetched once and never modified.

    Lookups return None when nothing matches; deciding whether that is an
    error is left to the caller.
    """

    def __init__(
        self,
        object_schema_id: str = "",
        object_types: tuple[ObjectType, ...] = (),
        attributes: Optional[Mapping[str, tuple[AttributeDefinition, ...]]] = None,
    ) -> None:
        self.object_schema_id = object_schema_id
        self._object_types = tuple(object_types)
        self._attributes = MappingProxyType(
            {type_id: tuple(attrs) for type_id, attrs in (attributes or {}).items()}
        )
        self._all_attributes = tuple(
            attr for type_id in self._attributes for attr in self._attributes[type_id]
        )

    @classmethod
    def build(cls, client: AssetsClient, object_schema_id: str) -> "SchemaCache":
        """
        Fetch the object types of a schema and the attributes of each type.

        Args:
            client: Assets API client
            object_schema_id: Schema to load; an empty ID yields an empty cache

        Returns:
            SchemaCache: The populated cache

        Raises:
            ProviderInitializationError: If any listing call fails
        """
        if not object_schema_id:
            logger.warning("No object schema configured, object types cannot be resolved")
            return cls()

        try:
            object_types = client.list_object_types(object_schema_id)
            attributes = {
                object_type.id: tuple(
                    attr if attr.object_type else attr.model_copy(update={"object_type": object_type})
                    for attr in client.list_object_type_attributes(object_type.id)
                )
                for object_type in object_types
            }
        except AssetsApiError as e:
            logger.error("Unable to load object schema", schema_id=object_schema_id, **e.context())
            raise ProviderInitializationError(
                f"Unable to load object schema {object_schema_id}: {e.message}"
            ) from e

        logger.info(
            "Object schema loaded",
            schema_id=object_schema_id,
            object_types=len(object_types),
            attributes=sum(len(a) for a in attributes.values()),
        )
        return cls(object_schema_id, tuple(object_types), attributes)

    @property
    def object_types(self) -> tuple[ObjectType, ...]:
        return self._object_types

    def attributes_for(self, object_type_id: str) -> tuple[AttributeDefinition, ...]:
        return self._attributes.get(object_type_id, ())

    def resolve_object_type(self, name: str) -> Optional[ObjectType]:
        """Return the first object type called name, or None."""
        for object_type in self._object_types:
            if object_type.name == name:
                return object_type
        return None

    def resolve_attribute(self, name: str, object_type_name: str) -> Optional[AttributeDefinition]:
        """Return the first attribute called name owned by object_type_name, or None."""
        for attr in self._all_attributes:
            if attr.name == name and attr.object_type_name == object_type_name:
                return attr
        return None
