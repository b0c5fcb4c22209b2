"""rulemap command: show which catalog rules the project follows."""

from __future__ import annotations

import argparse
import json

from lintmap.app.commands.helpers.runtime import pmd_manager
from lintmap.languages.java.detectors.pmd_rules import rule_category
from lintmap.utils import colorize, log, print_table


def cmd_rulemap(args: argparse.Namespace) -> None:
    manager = pmd_manager(args)
    log(f"  Running {manager.pmd_path} on {manager.project_path}")
    rule_map = manager.make_rule_map()

    if getattr(args, "json", False):
        print(json.dumps(rule_map.to_dict(), indent=2))
        return

    print(colorize(f"\n  {len(rule_map.followed)} followed, "
                   f"{len(rule_map.unfollowed)} unfollowed "
                   f"of {len(rule_map.available)} rules\n", "bold"))
    rows = [[rule, rule_category(rule) or "?"] for rule in rule_map.unfollowed]
    if rows:
        print_table(["Unfollowed rule", "Category"], rows)
    if rule_map.unknown:
        print(colorize(f"\n  Not in catalog: {', '.join(rule_map.unknown)}", "yellow"))
    print()
