"""Serialization for inputs, projections and summaries."""

from __future__ import annotations

import csv
import hashlib
import io
import json
from collections.abc import Sequence
from dataclasses import asdict
from typing import Any

from giftplan.analytics.metrics import ProjectionSummary
from giftplan.config.schema import ProjectionInput, validate_input
from giftplan.core.engine import YearSnapshot
from giftplan.utils.exceptions import InvalidInputError


def compute_input_hash(inp: ProjectionInput) -> str:
    """Compute a deterministic SHA-256 hash of an input.

    Uses canonical JSON (sorted keys, no whitespace) so the same
    logical input always produces the same hash.
    """
    canonical = json.dumps(inp.model_dump(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


def dump_input(inp: ProjectionInput) -> str:
    """Serialize an input to a JSON string."""
    return json.dumps(inp.model_dump(), indent=2)


def load_input(json_str: str) -> ProjectionInput:
    """Deserialize an input from a JSON string.

    Raises:
        InvalidInputError: If the JSON is malformed or a field is out of domain.
    """
    try:
        data: Any = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise InvalidInputError("input", f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidInputError("input", "expected a JSON object")
    return validate_input(data)


def dump_snapshots_csv(snapshots: Sequence[YearSnapshot]) -> str:
    """Export a projection as CSV.

    Returns:
        CSV string with Year, Total_Contributed, Total_Asset, Profit and
        Gift_Year columns.
    """
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["Year", "Total_Contributed", "Total_Asset", "Profit", "Gift_Year"])
    for s in snapshots:
        writer.writerow(
            [s.year, s.total_contributed, s.total_asset, s.profit, int(s.is_gift_year)]
        )
    return output.getvalue()


def dump_summary(summary: ProjectionSummary, inp: ProjectionInput | None = None) -> str:
    """Serialize a projection summary (and optionally its input) to JSON."""
    data: dict[str, Any] = asdict(summary)
    if inp is not None:
        data["input"] = inp.model_dump()
        data["input_hash"] = compute_input_hash(inp)
    return json.dumps(data, indent=2)
