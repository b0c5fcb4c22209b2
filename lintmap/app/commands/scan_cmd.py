"""scan command: run PMD and emit its results as a SARIF log."""

from __future__ import annotations

import argparse
import json

from lintmap.app.commands.helpers.runtime import pmd_manager
from lintmap.engine.sarif import build_sarif_log
from lintmap.utils import colorize, log, safe_write_text


def cmd_scan(args: argparse.Namespace) -> None:
    manager = pmd_manager(args)
    log(f"  Running {manager.pmd_path} on {manager.project_path}")
    results = manager.execute(manager.command())
    payload = json.dumps(build_sarif_log(results, tool_name="PMD"), indent=2) + "\n"

    output = getattr(args, "output", None)
    if output:
        safe_write_text(output, payload)
        print(colorize(f"  Wrote {len(results)} result(s) to {output}", "green"))
    else:
        print(payload, end="")
