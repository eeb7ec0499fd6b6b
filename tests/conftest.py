"""Global test configuration and fixtures."""

import os
import sys
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from jiraassets.config.provider_config import ProviderConfig
from jiraassets.context import ProviderContext
from jiraassets.models.assets import (
    AssetObject,
    AttributeDefinition,
    ObjectAttribute,
    ObjectType,
    StatusOption,
)
from jiraassets.providers.assets.client import AssetsClient
from jiraassets.providers.assets.schema_cache import SchemaCache
from jiraassets.providers.assets.status_table import StatusTable

HOST = ObjectType(id="10", name="Host")
NETWORK = ObjectType(id="11", name="Network")


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Keep provider settings from the developer's shell out of the tests."""
    for key in [k for k in os.environ if k.startswith("JIRAASSETS_")]:
        del os.environ[key]
    os.environ["JIRAASSETS_CONSOLE_ENABLED"] = "false"


def attribute_definition(attr_id: str, name: str, type_code: int, object_type=HOST) -> AttributeDefinition:
    return AttributeDefinition(id=attr_id, name=name, type=type_code, object_type=object_type)


def attribute_record(name: str, type_code: int, **value: Any) -> ObjectAttribute:
    """Build an object attribute record as returned by GET object/{id}/attributes."""
    values = [value] if value else []
    return ObjectAttribute.model_validate(
        {
            "objectTypeAttribute": {"id": f"attr-{name}", "name": name, "type": type_code},
            "objectAttributeValues": values,
        }
    )


@pytest.fixture
def status_table() -> StatusTable:
    return StatusTable(
        [StatusOption(id="1", name="Enabled"), StatusOption(id="2", name="Disabled")]
    )


@pytest.fixture
def schema_cache() -> SchemaCache:
    return SchemaCache(
        object_schema_id="3",
        object_types=(HOST, NETWORK),
        attributes={
            HOST.id: (
                attribute_definition("100", "Name", 0),
                attribute_definition("101", "Status", 7),
                attribute_definition("102", "Network", 1),
                attribute_definition("103", "Owner", 2),
            ),
            NETWORK.id: (attribute_definition("200", "Name", 0, NETWORK),),
        },
    )


@pytest.fixture
def provider_config() -> ProviderConfig:
    return ProviderConfig(
        workspace_id="ws-1",
        user="admin@example.com",
        password="token",
        object_schema_id="3",
        ignore_keys=("CI Class",),
    )


@pytest.fixture
def mock_client() -> Mock:
    """Assets client double; each test sets the return values it needs."""
    return Mock(spec=AssetsClient)


@pytest.fixture
def remote_object() -> AssetObject:
    return AssetObject.model_validate(
        {
            "workspaceId": "ws-1",
            "globalId": "ws-1:42",
            "id": "42",
            "label": "web-01",
            "objectKey": "ITSM-42",
            "created": "2024-01-01T10:00:00.000Z",
            "updated": "2024-01-02T10:00:00.000Z",
            "hasAvatar": False,
            "objectType": {"id": "10", "name": "Host"},
        }
    )


@pytest.fixture
def provider_context(mock_client, provider_config, schema_cache, status_table) -> ProviderContext:
    return ProviderContext(
        client=mock_client,
        config=provider_config,
        schema_cache=schema_cache,
        status_table=status_table,
    )


@pytest.fixture
def make_record():
    """Factory for object attribute records."""
    return attribute_record
