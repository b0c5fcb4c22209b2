"""Base class for linter adapters that produce a RuleMap and a config file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from lintmap.engine.rule_map import RuleMap


class LintManager:
    """Runs one external linter over ``project_path``.

    Subclasses supply the rule catalog, the rule map, and the config file
    rendering for their tool.
    """

    def __init__(self, project_path: str | Path) -> None:
        self.project_path = str(project_path)

    def results_to_warnings(self, results: list[dict[str, Any]]) -> list[str]:
        """Distinct ruleIds of SARIF results, in first-seen order."""
        return list(dict.fromkeys(r["ruleId"] for r in results if r.get("ruleId")))

    def get_available_rules(self) -> list[str]:
        raise NotImplementedError

    def make_rule_map(self) -> RuleMap:
        raise NotImplementedError

    def make_config_file(self) -> str:
        raise NotImplementedError
