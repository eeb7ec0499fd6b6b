"""Assets API integration: REST client, schema cache, status table and value codec."""

from .client import AssetsClient
from .codec import AttributeCodec, DecodeMode
from .schema_cache import SchemaCache
from .status_table import StatusTable

__all__: list[str] = [
    "AssetsClient",
    "AttributeCodec",
    "DecodeMode",
    "SchemaCache",
    "StatusTable",
]
