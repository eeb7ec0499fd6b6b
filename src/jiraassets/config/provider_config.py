"""Provider block configuration and its environment fallbacks."""

import os
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from jiraassets.config.settings import DEFAULT_API_URL, get_setting
from jiraassets.exceptions import ConfigurationError
from jiraassets.models.diagnostics import Diagnostic

# Value Terraform's shims use for attributes that are not known until apply.
UNKNOWN_VALUE = "74D93920-ED26-11E3-AC10-0800200C9A66"

ENV_WORKSPACE_ID = "JIRAASSETS_WORKSPACE_ID"
ENV_USER = "JIRAASSETS_USER"
ENV_PASSWORD = "JIRAASSETS_PASSWORD"
ENV_OBJECTSCHEMA_ID = "JIRAASSETS_OBJECTSCHEMA_ID"


class ProviderConfig(BaseModel):
    """Resolved provider settings. Immutable once the provider is configured."""

    model_config = ConfigDict(frozen=True)

    workspace_id: str = Field(..., min_length=1, description="Workspace Id of the Assets instance")
    user: str = Field(..., min_length=1, description="Admin or service account user name")
    password: SecretStr = Field(..., description="Personal access token for the account")
    object_schema_id: str = Field("", description="ID of the object schema to use")
    ignore_keys: tuple[str, ...] = Field(
        (), description="Attribute names never read back into state"
    )
    api_url: str = Field(DEFAULT_API_URL, description="Base URL of the Assets API gateway")
    strict_read: bool = Field(
        False, description="Fail reads on attribute values that cannot be decoded"
    )
    request_timeout: Optional[float] = Field(
        None, description="Per-request timeout in seconds; no timeout when unset"
    )


# (config key, environment variable, display name, root attribute path)
_FIELDS = (
    ("workspace_id", ENV_WORKSPACE_ID, "Workspace Id", "workspace_id"),
    ("user", ENV_USER, "User", "user"),
    ("password", ENV_PASSWORD, "Password", "password"),
    ("object_schema_id", ENV_OBJECTSCHEMA_ID, "objectschemaId", "object_schema_id"),
)
_REQUIRED = ("workspace_id", "user", "password")


def _unknown_diagnostic(name: str, env_var: str, path: str) -> Diagnostic:
    return Diagnostic(
        summary=f"Unknown Assets {name}",
        detail=(
            "The provider cannot create the Assets API client as there is an unknown "
            f"configuration value for the Assets API {name}. Either target apply the source "
            "of the value first, set the value statically in the configuration, or use the "
            f"{env_var} environment variable."
        ),
        attribute=path,
    )


def _missing_diagnostic(name: str, env_var: str, path: str) -> Diagnostic:
    return Diagnostic(
        summary=f"Missing Assets API {name}",
        detail=(
            "The provider cannot create the Assets API client as there is a missing or empty "
            f"value for the Assets API {name}. Set the {path} value in the configuration or use "
            f"the {env_var} environment variable. If either is already set, ensure the value "
            "is not empty."
        ),
        attribute=path,
    )


def resolve_provider_config(
    raw_config: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ProviderConfig:
    """
    Merge the provider block with environment fallbacks and validate it.

    Configuration values win over environment variables whenever they are not
    null. All problems are collected before raising so the practitioner sees
    every offending field at once.

    Args:
        raw_config: Provider block as sent by the host.
        environ: Environment to read fallbacks from, defaults to os.environ.

    Returns:
        ProviderConfig: The validated configuration.

    Raises:
        ConfigurationError: If a setting is unknown or a required one is missing.
    """
    raw_config = dict(raw_config or {})
    environ = os.environ if environ is None else environ

    unknown = [
        _unknown_diagnostic(name, env_var, path)
        for key, env_var, name, path in _FIELDS
        if raw_config.get(key) == UNKNOWN_VALUE
    ]
    if unknown:
        raise ConfigurationError(unknown)

    values: dict[str, str] = {}
    for key, env_var, _name, _path in _FIELDS:
        value = raw_config.get(key)
        values[key] = environ.get(env_var, "") if value is None else str(value)

    missing = [
        _missing_diagnostic(name, env_var, path)
        for key, env_var, name, path in _FIELDS
        if key in _REQUIRED and not values[key]
    ]
    if missing:
        raise ConfigurationError(missing)

    ignore_keys = raw_config.get("ignore_keys") or ()
    if isinstance(ignore_keys, str) or not all(isinstance(k, str) for k in ignore_keys):
        raise ConfigurationError(
            [
                Diagnostic(
                    summary="Invalid ignore_keys",
                    detail="ignore_keys must be a list of attribute names.",
                    attribute="ignore_keys",
                )
            ]
        )

    timeout = raw_config.get("request_timeout", get_setting("REQUEST_TIMEOUT"))
    return ProviderConfig(
        workspace_id=values["workspace_id"],
        user=values["user"],
        password=values["password"],
        object_schema_id=values["object_schema_id"],
        ignore_keys=tuple(ignore_keys),
        api_url=raw_config.get("api_url") or get_setting("API_URL", DEFAULT_API_URL),
        strict_read=bool(raw_config.get("strict_read", False)),
        request_timeout=float(timeout) if timeout else None,
    )
