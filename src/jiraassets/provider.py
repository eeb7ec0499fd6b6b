"""Provider entry point: metadata, schema, configuration and registries."""

import os
import threading
from collections.abc import Mapping
from typing import Any, Optional

from jiraassets._package import PROVIDER_TYPE_NAME, __version__
from jiraassets.config.provider_config import ProviderConfig, resolve_provider_config
from jiraassets.context import ProviderContext
from jiraassets.datasources.object_schema import ObjectSchemaDataSource
from jiraassets.exceptions import AssetsApiError, ProviderInitializationError
from jiraassets.helpers.logger import MASKED, get_logger
from jiraassets.models.schema import Schema, SchemaAttribute
from jiraassets.providers.assets.client import AssetsClient
from jiraassets.providers.assets.schema_cache import SchemaCache
from jiraassets.providers.assets.status_table import StatusTable
from jiraassets.resources.base import BaseResource
from jiraassets.resources.object_resource import ObjectResource

logger = get_logger(__name__)

RESOURCES: tuple[type[BaseResource], ...] = (ObjectResource,)
DATA_SOURCES: tuple[type[BaseResource], ...] = (ObjectSchemaDataSource,)


class JiraAssetsProvider:
    """
    Terraform provider for Jira Assets.

    configure() runs at most once per provider instance; concurrent callers
    wait for the first one and receive the same immutable context.
    """

    def __init__(self, version: str = __version__, client_factory=AssetsClient) -> None:
        """
        :param version: Provider version reported to the host ("dev" for local builds).
        :param client_factory: Callable building the Assets client from the resolved config.
        """
        self.version = version
        self._client_factory = client_factory
        self._context: Optional[ProviderContext] = None
        self._configure_lock = threading.Lock()

    def metadata(self) -> dict[str, str]:
        return {"type_name": PROVIDER_TYPE_NAME, "version": self.version}

    @staticmethod
    def schema() -> Schema:
        return Schema(
            description="A Terraform provider for Jira Assets.",
            attributes=(
                SchemaAttribute(
                    name="workspace_id",
                    optional=True,
                    description="Workspace Id of the Assets instance.",
                ),
                SchemaAttribute(
                    name="user",
                    optional=True,
                    description="Username of an admin or service account with access to the Jira API.",
                ),
                SchemaAttribute(
                    name="password",
                    optional=True,
                    sensitive=True,
                    description="Personal access token for the admin or service account.",
                ),
                SchemaAttribute(
                    name="object_schema_id",
                    optional=True,
                    description="ID of the object schema to use.",
                ),
                SchemaAttribute(
                    name="ignore_keys",
                    type="list",
                    element_type="string",
                    optional=True,
                    description="List of keys to ignore when creating resources.",
                ),
                SchemaAttribute(
                    name="api_url",
                    optional=True,
                    description="Base URL of the Assets API gateway.",
                ),
                SchemaAttribute(
                    name="strict_read",
                    type="bool",
                    optional=True,
                    default=False,
                    description="Fail refreshes when an attribute value cannot be decoded.",
                ),
            ),
        )

    @property
    def context(self) -> Optional[ProviderContext]:
        return self._context

    def configure(
        self,
        raw_config: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> ProviderContext:
        """
        Resolve settings, load the status types and object schema, and build the context.

        Args:
            raw_config: Provider block from the host
            environ: Environment for fallbacks, defaults to os.environ

        Returns:
            ProviderContext: Immutable state shared by resources and data sources

        Raises:
            ConfigurationError: If settings are unknown or missing
            ProviderInitializationError: If the schema or status types cannot be loaded
        """
        with self._configure_lock:
            if self._context is not None:
                return self._context

            logger.info("Configuring Jira Assets provider")
            config = resolve_provider_config(raw_config, os.environ if environ is None else environ)
            log = logger.bind(
                jiraassets_workspace_id=config.workspace_id,
                jiraassets_user=config.user,
                jiraassets_password=MASKED,
                jiraassets_objectschema_id=config.object_schema_id,
            )
            log.debug("Creating Assets client")

            client = self._client_factory(
                workspace_id=config.workspace_id,
                user=config.user,
                password=config.password.get_secret_value(),
                api_url=config.api_url,
                timeout=config.request_timeout,
            )
            status_table = self._load_status_table(client, config)
            schema_cache = SchemaCache.build(client, config.object_schema_id)

            self._context = ProviderContext(
                client=client,
                config=config,
                schema_cache=schema_cache,
                status_table=status_table,
            )
            log.info("Configured Jira Assets client", success=True)
            return self._context

    @staticmethod
    def _load_status_table(client: AssetsClient, config: ProviderConfig) -> StatusTable:
        try:
            options = client.list_status_types(config.object_schema_id or None)
        except AssetsApiError as e:
            logger.error("Unable to load status types", **e.context())
            raise ProviderInitializationError(f"Unable to load status types: {e.message}") from e
        return StatusTable(options)

    def resources(self) -> dict[str, type[BaseResource]]:
        return {resource.type_name: resource for resource in RESOURCES}

    def data_sources(self) -> dict[str, type[BaseResource]]:
        return {data_source.type_name: data_source for data_source in DATA_SOURCES}

    def resource(self, type_name: str, context: Optional[ProviderContext] = None) -> BaseResource:
        """Instantiate a registered resource or data source bound to the configured context."""
        registry = {**self.resources(), **self.data_sources()}
        if type_name not in registry:
            raise ValueError(f"Unsupported resource type: {type_name}")
        context = context or self._context
        if context is None:
            raise ProviderInitializationError("The provider must be configured before use.")
        return registry[type_name](context)

    def close(self) -> None:
        """Release the HTTP session of the configured client, if any."""
        if self._context is not None:
            self._context.client.close()
            logger.debug("Closed Assets client")
