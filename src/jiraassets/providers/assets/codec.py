"""Translation between remote attribute records and flat string values."""

from collections.abc import Mapping

from jiraassets.exceptions import (
    SchemaResolutionError,
    UnknownStatusError,
    UnsupportedAttributeTypeError,
)
from jiraassets.models.assets import ObjectAttribute, PayloadAttribute, PayloadAttributeValue
from jiraassets.models.base_enum_model import BaseEnumModel, TypeCode
from jiraassets.providers.assets.schema_cache import SchemaCache
from jiraassets.providers.assets.status_table import StatusTable


class DecodeMode(BaseEnumModel):
    """How reads treat attribute values that cannot be decoded."""

    LENIENT = "lenient"  # keep an empty value and log
    STRICT = "strict"  # fail the read


class AttributeCodec:
    """Decodes attribute records into strings and encodes strings into payload attributes."""

    def __init__(self, schema_cache: SchemaCache, status_table: StatusTable) -> None:
        self.schema_cache = schema_cache
        self.status_table = status_table

    def decode(self, record: ObjectAttribute) -> str:
        """
        Flatten one attribute record to a single string.

        Only the first value of multi-valued attributes is kept.

        :param record: Attribute record from the object attributes listing.
        :return: The decoded value, "" when the record carries no value.
        :raises UnsupportedAttributeTypeError: For type codes other than default, reference and status.
        """
        type_code = TypeCode.from_value(record.object_type_attribute.type)
        if type_code not in (TypeCode.DEFAULT, TypeCode.REFERENCE, TypeCode.STATUS):
            raise UnsupportedAttributeTypeError(type_code, attribute=f"attributes.{record.name}")

        if not record.object_attribute_values:
            return ""
        value = record.object_attribute_values[0]

        if type_code == TypeCode.REFERENCE:
            return value.search_value or ""
        if type_code == TypeCode.STATUS:
            return self.status_table.name_for(value.status.id) if value.status else ""
        return value.value or ""

    def encode(self, name: str, raw_value: str, object_type_name: str) -> PayloadAttribute:
        """
        Build the payload attribute for one name/value pair of an object type.

        :param name: Attribute name as written in configuration.
        :param raw_value: Value as written in configuration; status names for status attributes.
        :param object_type_name: Name of the object type owning the attribute.
        :return: Payload attribute keyed by the attribute definition ID.
        :raises SchemaResolutionError: If the object type has no attribute with that name.
        :raises UnknownStatusError: If a status attribute is given an unknown status name.
        """
        definition = self.schema_cache.resolve_attribute(name, object_type_name)
        if definition is None:
            raise SchemaResolutionError(
                f"attribute {name!r} is not defined for object type {object_type_name!r}",
                attribute=f"attributes.{name}",
            )

        value = raw_value
        if definition.type == TypeCode.STATUS:
            try:
                value = self.status_table.id_for(raw_value)
            except UnknownStatusError as e:
                e.attribute = f"attributes.{name}"
                raise

        return PayloadAttribute(
            object_type_attribute_id=definition.id,
            object_attribute_values=[PayloadAttributeValue(value=value)],
        )

    def encode_all(self, attributes: Mapping[str, str], object_type_name: str) -> list[PayloadAttribute]:
        """Encode every attribute, stopping at the first failure."""
        return [self.encode(name, value, object_type_name) for name, value in attributes.items()]
