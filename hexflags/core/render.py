from __future__ import annotations

import json
from typing import Any

from hexflags.core.decode import DecodeReport
from hexflags.core.hexval import format_hex


def render_lines(report: DecodeReport) -> list[str]:
    lines: list[str] = []
    for bit in report.bits:
        if bit.name is not None:
            lines.append(f"bit {bit.index}: [{bit.name}] {format_hex(bit.value)}")
        else:
            lines.append(f"bit {bit.index}: {format_hex(bit.value)}")
    lines.append("")
    lines.append(report.summary)
    return lines


def render_text(report: DecodeReport) -> str:
    return "\n".join(render_lines(report)) + "\n"


def report_to_json(report: DecodeReport, type_name: str | None = None) -> dict[str, Any]:
    return {
        "value": format_hex(report.value),
        "type": type_name,
        "bits": [{"bit": b.index, "value": format_hex(b.value), "name": b.name} for b in report.bits],
        "summary": report.summary,
    }


def dumps(obj: Any) -> str:
    return json.dumps(obj, sort_keys=True, indent=2) + "\n"
