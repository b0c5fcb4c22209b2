"""SARIF 2.1.0 result shapes for linter diagnostics."""

from __future__ import annotations

from typing import Any

SARIF_VERSION = "2.1.0"
SARIF_SCHEMA = "https://json.schemastore.org/sarif-2.1.0.json"


def make_result(
    rule_id: str,
    message: str,
    *,
    level: str | None = None,
    uri: str | None = None,
    start_line: int | None = None,
) -> dict[str, Any]:
    """Build one SARIF ``result`` object."""
    result: dict[str, Any] = {
        "ruleId": rule_id,
        "message": {"text": message},
    }
    if level:
        result["level"] = level
    if uri:
        physical: dict[str, Any] = {"artifactLocation": {"uri": uri}}
        if start_line is not None:
            physical["region"] = {"startLine": start_line}
        result["locations"] = [{"physicalLocation": physical}]
    return result


def build_sarif_log(
    results: list[dict[str, Any]],
    *,
    tool_name: str,
    rules: list[str] | None = None,
) -> dict[str, Any]:
    """Wrap results in a single-run SARIF log.

    ``rules`` defaults to the distinct ruleIds seen in ``results``.
    """
    if rules is None:
        rules = list(dict.fromkeys(r["ruleId"] for r in results if r.get("ruleId")))
    return {
        "version": SARIF_VERSION,
        "$schema": SARIF_SCHEMA,
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": tool_name,
                        "rules": [
                            {"id": rule_id, "shortDescription": {"text": rule_id}}
                            for rule_id in rules
                        ],
                    }
                },
                "results": list(results),
            }
        ],
    }


__all__ = ["SARIF_SCHEMA", "SARIF_VERSION", "build_sarif_log", "make_result"]
