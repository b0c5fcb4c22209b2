"""rules command: list the PMD rule catalog."""

from __future__ import annotations

import argparse

from lintmap.languages.java.detectors.pmd_rules import (
    PMD_CATEGORIES,
    RULES_BY_CATEGORY,
    make_full_rule_id,
)


def cmd_rules(args: argparse.Namespace) -> None:
    category = getattr(args, "category", None)
    categories = [category] if category else list(PMD_CATEGORIES)
    for cat in categories:
        for rule in RULES_BY_CATEGORY[cat]:
            print(make_full_rule_id(rule) if args.full else rule)
