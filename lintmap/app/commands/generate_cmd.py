"""generate command: build a PMD ruleset from the rules a project follows."""

from __future__ import annotations

import argparse

from lintmap.app.commands.helpers.runtime import command_runtime, pmd_manager
from lintmap.utils import colorize, log, resolve_path, safe_write_text


def cmd_generate(args: argparse.Namespace) -> None:
    manager = pmd_manager(args)
    log(f"  Running {manager.pmd_path} on {manager.project_path}")
    content = manager.make_config_file()

    output = getattr(args, "output", None)
    if not output:
        configured = command_runtime(args).config.get("output_path")
        # config paths are relative to the project root, not the cwd
        output = resolve_path(configured) if configured else None
    if output:
        safe_write_text(output, content + "\n")
        print(colorize(f"  Wrote PMD ruleset to {output}", "green"))
    else:
        print(content)
