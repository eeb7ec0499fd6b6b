"""
Jira Assets provider - Terraform lifecycle operations over the Assets object API.

Usage:
    from jiraassets import JiraAssetsProvider

    provider = JiraAssetsProvider()
    context = provider.configure({"workspace_id": "...", "object_schema_id": "3"})
    resource = provider.resource("jiraassets_object", context)
    state = resource.create(ObjectResourceModel(type="Host", attributes={"Name": "web-01"}))
"""

from ._package import __version__
from .exceptions import ConfigurationError, JiraAssetsError, ResourceOperationError
from .models.resource import ObjectResourceModel
from .provider import JiraAssetsProvider, ProviderContext

__all__: list[str] = [
    "ConfigurationError",
    "JiraAssetsError",
    "JiraAssetsProvider",
    "ObjectResourceModel",
    "ProviderContext",
    "ResourceOperationError",
    "__version__",
]
