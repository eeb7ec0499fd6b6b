"""Terraform-style diagnostics returned to the host."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from jiraassets.models.base_enum_model import BaseEnumModel


class Severity(BaseEnumModel):
    """Diagnostic severity as understood by the host."""

    ERROR = "error"
    WARNING = "warning"


class Diagnostic(BaseModel):
    """A single user-facing message, optionally pinned to an attribute path."""

    model_config = ConfigDict(frozen=True)

    severity: Severity = Field(Severity.ERROR, description="Diagnostic severity")
    summary: str = Field(..., description="Short summary shown to the practitioner")
    detail: str = Field("", description="Longer explanation of the problem")
    attribute: Optional[str] = Field(
        None, description="Dotted attribute path the diagnostic applies to"
    )

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
