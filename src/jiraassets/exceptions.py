"""Exception hierarchy for the Jira Assets provider.

Every exception can render itself as host diagnostics so that the CLI and the
Python API report failures the same way.
"""

from typing import Any, Optional

from jiraassets.models.diagnostics import Diagnostic


class JiraAssetsError(Exception):
    """Base class for all provider errors."""

    summary = "Jira Assets provider error"

    def __init__(self, message: str, attribute: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.attribute = attribute

    def to_diagnostics(self) -> list[Diagnostic]:
        return [Diagnostic(summary=self.summary, detail=self.message, attribute=self.attribute)]


class ConfigurationError(JiraAssetsError):
    """Missing or unknown provider settings. Carries one diagnostic per field."""

    summary = "Invalid provider configuration"

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        super().__init__("; ".join(d.summary for d in diagnostics))
        self.diagnostics = list(diagnostics)

    def to_diagnostics(self) -> list[Diagnostic]:
        return list(self.diagnostics)


class ProviderInitializationError(JiraAssetsError):
    """The object schema or status types could not be loaded at configure time."""

    summary = "Unable to initialize Jira Assets provider"


class SchemaResolutionError(JiraAssetsError):
    """An object type or attribute name does not exist in the cached schema."""

    summary = "Unknown object schema element"


class CodecError(JiraAssetsError):
    """An attribute value could not be translated to or from the API format."""

    summary = "Error during object attributes setting"


class UnsupportedAttributeTypeError(CodecError):
    def __init__(self, type_code: int, attribute: Optional[str] = None) -> None:
        super().__init__(f"unsupported attribute type: {int(type_code)}", attribute)
        self.type_code = int(type_code)


class UnknownStatusError(CodecError):
    def __init__(self, status: str, available: list[str], attribute: Optional[str] = None) -> None:
        super().__init__(
            "unknown status, available statuses: " + ",".join(available), attribute
        )
        self.status = status
        self.available = list(available)


class AssetsApiError(JiraAssetsError):
    """A request to the Assets REST API failed.

    Keeps the request context so callers can log it for diagnosis.
    """

    summary = "Assets API request failed"

    def __init__(
        self,
        message: str,
        url: str = "",
        method: str = "",
        status_code: Optional[int] = None,
        headers: Optional[dict[str, Any]] = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.url = url
        self.method = method
        self.status_code = status_code
        self.headers = dict(headers or {})
        self.body = body

    def context(self) -> dict[str, Any]:
        """Request/response details suitable for structured logging."""
        return {
            "url": self.url,
            "method": self.method,
            "status_code": self.status_code,
            "headers": self.headers,
            "body": self.body,
        }


class ResourceOperationError(JiraAssetsError):
    """A lifecycle operation failed; surfaced to the practitioner as-is."""

    def __init__(
        self,
        summary: str,
        detail: str,
        attribute: Optional[str] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(detail, attribute)
        self.summary = summary
        self.cause = cause
