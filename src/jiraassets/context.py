"""Configured provider state handed to every resource and data source."""

from dataclasses import dataclass, field

from jiraassets.config.provider_config import ProviderConfig
from jiraassets.providers.assets.client import AssetsClient
from jiraassets.providers.assets.codec import AttributeCodec, DecodeMode
from jiraassets.providers.assets.schema_cache import SchemaCache
from jiraassets.providers.assets.status_table import StatusTable

# Attributes the API manages itself and always returns; never part of state.
RESERVED_ATTRIBUTE_NAMES = ("Created", "Key", "Updated")


@dataclass(frozen=True)
class ProviderContext:
    """
    Immutable result of provider configuration.

    Built once by JiraAssetsProvider.configure and shared read-only by every
    controller, so concurrent lifecycle calls need no locking.
    """

    client: AssetsClient
    config: ProviderConfig
    schema_cache: SchemaCache
    status_table: StatusTable
    codec: AttributeCodec = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "codec", AttributeCodec(self.schema_cache, self.status_table))

    @property
    def workspace_id(self) -> str:
        return self.config.workspace_id

    @property
    def object_schema_id(self) -> str:
        return self.config.object_schema_id

    @property
    def ignore_keys(self) -> tuple[str, ...]:
        """Reserved attribute names followed by the configured ignore keys."""
        return RESERVED_ATTRIBUTE_NAMES + tuple(self.config.ignore_keys)

    @property
    def decode_mode(self) -> DecodeMode:
        return DecodeMode.STRICT if self.config.strict_read else DecodeMode.LENIENT
