"""JSON export of the validation report.

Why JSON:
- CI pipelines can consume the per-field verdicts without parsing console text.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ValidationReport


def export_report_json(*, report: ValidationReport, output_path: Path) -> Path:
    """Write `ValidationReport` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = report.model_dump(mode="json")
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
