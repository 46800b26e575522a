"""Field validation pipeline.

This module holds the whole validation flow: one format rule per field, the
GitHub existence check behind `UsernameExistenceChecker`, and the fold of all
results into a single `ValidationReport`. The CLI only renders what it gets
back through `PipelineHooks`, which keeps printing out of the core logic.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Awaitable, Callable

from core.domain.models import (
    ErrorKind,
    ExtractedField,
    FieldLabel,
    LookupOutcome,
    StudentInfoDocument,
    ValidationReport,
    ValidationResult,
)
from core.interfaces.checker import UsernameExistenceChecker
from core.services.extraction import extract_field

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"[A-Za-z][A-Za-z '\-]+")
_UOB_ID_RE = re.compile(r"[0-9]{8,9}")
_GITHUB_USERNAME_RE = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9\-]*[A-Za-z0-9])?")

GITHUB_USERNAME_MAX_LENGTH = 39


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress lines)."""

    note: Callable[[str], None] | None = None
    lookup_start: Callable[[str], None] | None = None
    result: Callable[[ValidationResult], None] | None = None


def _missing(field: ExtractedField) -> ValidationResult:
    return ValidationResult(
        label=field.label,
        valid=False,
        message=f"'{field.label.value}' field is missing or empty.",
        error=ErrorKind.MISSING_FIELD,
    )


def validate_name(field: ExtractedField) -> ValidationResult:
    if not field.present:
        return _missing(field)

    value = field.raw_value
    if _NAME_RE.fullmatch(value):
        return ValidationResult(
            label=field.label,
            valid=True,
            value=value,
            message=f"Name is valid: '{value}'",
        )
    return ValidationResult(
        label=field.label,
        valid=False,
        value=value,
        error=ErrorKind.FORMAT_INVALID,
        message=(
            f"Name '{value}' contains invalid characters. "
            "Only letters, spaces, hyphens, and apostrophes are allowed."
        ),
    )


def validate_uob_id(field: ExtractedField) -> ValidationResult:
    if not field.present:
        return _missing(field)

    value = field.raw_value
    if _UOB_ID_RE.fullmatch(value):
        return ValidationResult(
            label=field.label,
            valid=True,
            value=value,
            message=f"UOB ID is valid: '{value}' ({len(value)} digits)",
        )
    return ValidationResult(
        label=field.label,
        valid=False,
        value=value,
        error=ErrorKind.FORMAT_INVALID,
        message=f"UOB ID '{value}' is invalid. It must be exactly 8 or 9 digits (0-9 only).",
    )


def is_github_username_format(value: str) -> bool:
    """GitHub rules: 1-39 ASCII alphanumerics or hyphens, alphanumeric at both ends."""

    if not value or len(value) > GITHUB_USERNAME_MAX_LENGTH:
        return False
    return _GITHUB_USERNAME_RE.fullmatch(value) is not None


def validate_github_username_format(field: ExtractedField) -> ValidationResult:
    """Phase 1 of the username check (local, offline)."""

    if not field.present:
        return _missing(field)

    value = field.raw_value
    if is_github_username_format(value):
        return ValidationResult(
            label=field.label,
            valid=True,
            value=value,
            message=f"GitHub Username format is valid: '{value}'",
        )
    return ValidationResult(
        label=field.label,
        valid=False,
        value=value,
        error=ErrorKind.FORMAT_INVALID,
        message=f"GitHub Username '{value}' has an invalid format.",
    )


async def validate_github_username(
    field: ExtractedField,
    checker: UsernameExistenceChecker,
    *,
    hooks: PipelineHooks | None = None,
) -> ValidationResult:
    """Format check, then the remote existence check if the format passed."""

    format_result = validate_github_username_format(field)
    if not format_result.valid:
        return format_result
    return await confirm_github_username(format_result, checker, hooks=hooks)


async def confirm_github_username(
    format_result: ValidationResult,
    checker: UsernameExistenceChecker,
    *,
    hooks: PipelineHooks | None = None,
) -> ValidationResult:
    """Phase 2: ask `checker` whether a format-valid username exists."""

    hooks = hooks or PipelineHooks()
    username = format_result.value
    if hooks.note:
        hooks.note(format_result.message)
    if hooks.lookup_start:
        hooks.lookup_start(username)

    lookup = await checker.exists(username)
    logger.debug("Lookup for %r -> %s (status=%s)", username, lookup.outcome.value, lookup.status_code)

    notes = [format_result.message]
    if lookup.outcome is LookupOutcome.EXISTS:
        return ValidationResult(
            label=format_result.label,
            valid=True,
            value=username,
            message=f"GitHub user '{username}' exists.",
            lookup=lookup,
            notes=notes,
        )

    if lookup.outcome is LookupOutcome.NOT_FOUND:
        message = f"GitHub user '{username}' does NOT exist (HTTP 404)."
    elif lookup.outcome is LookupOutcome.RATE_LIMITED:
        message = "GitHub API rate limit exceeded (HTTP 403). Unable to verify user."
    elif lookup.outcome is LookupOutcome.TRANSPORT_ERROR:
        message = f"Could not reach the GitHub API to verify user '{username}': {lookup.detail or 'unknown error'}"
    else:
        message = f"GitHub API returned unexpected status code: {lookup.status_code} for user '{username}'."

    error = ErrorKind.NETWORK_ERROR if lookup.outcome is LookupOutcome.TRANSPORT_ERROR else ErrorKind.REMOTE_LOOKUP_FAILED
    return ValidationResult(
        label=format_result.label,
        valid=False,
        value=username,
        message=message,
        error=error,
        lookup=lookup,
        notes=notes,
    )


RemoteValidator = Callable[..., Awaitable[ValidationResult]]


@dataclass(frozen=True)
class FieldRule:
    """One row of the validation table.

    Rows with `validate_remote` run it (local format phase included) with the
    existence checker; the other rows are pure functions of the field.
    """

    label: FieldLabel
    validate: Callable[[ExtractedField], ValidationResult]
    validate_remote: RemoteValidator | None = None

    @property
    def remote(self) -> bool:
        return self.validate_remote is not None


FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule(FieldLabel.NAME, validate_name),
    FieldRule(FieldLabel.UOB_ID, validate_uob_id),
    FieldRule(
        FieldLabel.GITHUB_USERNAME,
        validate_github_username_format,
        validate_remote=validate_github_username,
    ),
)


def aggregate(document: StudentInfoDocument, results: list[ValidationResult]) -> ValidationReport:
    """Fold per-field results into the overall verdict."""

    return ValidationReport(path=document.path, results=list(results))


async def run_validation(
    document: StudentInfoDocument,
    *,
    checker: UsernameExistenceChecker,
    hooks: PipelineHooks | None = None,
) -> ValidationReport:
    """Validate every field of `document`, in table order.

    A failing field never stops the others from being evaluated.
    """

    hooks = hooks or PipelineHooks()
    results: list[ValidationResult] = []

    for rule in FIELD_RULES:
        field = extract_field(document.content, rule.label)
        if rule.validate_remote is not None:
            result = await rule.validate_remote(field, checker, hooks=hooks)
        else:
            result = rule.validate(field)
        results.append(result)
        if hooks.result:
            hooks.result(result)

    report = aggregate(document, results)
    logger.info("Validated %s: failed=%s", document.path, report.failed)
    return report
