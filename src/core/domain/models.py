"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  Core to I/O libraries.
- The report serializes to JSON for CI pipelines with no extra code.

Note:
- These models describe *what* a validation outcome is, not *how* it is obtained.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, computed_field


class FieldLabel(str, Enum):
    """The three labeled fields a student info file must carry."""

    NAME = "Name"
    UOB_ID = "UOB ID"
    GITHUB_USERNAME = "GitHub Username"


class ErrorKind(str, Enum):
    """Non-fatal failure categories recorded on a `ValidationResult`."""

    MISSING_FIELD = "missing_field"
    FORMAT_INVALID = "format_invalid"
    REMOTE_LOOKUP_FAILED = "remote_lookup_failed"
    NETWORK_ERROR = "network_error"


class LookupOutcome(str, Enum):
    """Result of asking a remote service whether a username exists."""

    EXISTS = "exists"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    UNEXPECTED_STATUS = "unexpected_status"
    TRANSPORT_ERROR = "transport_error"


class StudentInfoDocument(BaseModel):
    """A student info file that was found and read."""

    path: Path = Field(..., description="Path the document was read from.")
    content: str = Field(default="", description="Full text of the document.")


class ExtractedField(BaseModel):
    """A labeled value pulled out of the document.

    `present` is False when the label line is absent or its value is empty;
    in that case `raw_value` is always "".
    """

    label: FieldLabel
    raw_value: str = Field(default="", description="Value with surrounding whitespace removed.")
    present: bool = False


class LookupResult(BaseModel):
    """Normalized answer of a `UsernameExistenceChecker`."""

    outcome: LookupOutcome
    status_code: int | None = Field(
        default=None,
        description="HTTP status returned by the remote API, if a response arrived.",
    )
    detail: str | None = Field(
        default=None,
        description="Underlying transport error text for `transport_error`.",
    )


class ValidationResult(BaseModel):
    """Outcome of validating one field."""

    label: FieldLabel
    valid: bool
    message: str = Field(..., min_length=1, description="Human readable reason.")
    value: str = Field(default="", description="Value that was checked (may be empty).")
    error: ErrorKind | None = Field(
        default=None,
        description="Failure category; None when the field is valid.",
    )
    lookup: LookupResult | None = Field(
        default=None,
        description="Existence check result (GitHub Username only, when it ran).",
    )
    notes: list[str] = Field(
        default_factory=list,
        description="Intermediate checks that passed before the final verdict.",
    )


class ValidationReport(BaseModel):
    """Aggregate verdict for one invocation (the OverallStatus)."""

    path: Path
    file_found: bool = Field(
        default=True,
        description="False when the input file was missing; no field was checked.",
    )
    results: list[ValidationResult] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def failed(self) -> bool:
        return not self.file_found or any(not r.valid for r in self.results)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def result_for(self, label: FieldLabel) -> ValidationResult | None:
        for result in self.results:
            if result.label is label:
                return result
        return None
