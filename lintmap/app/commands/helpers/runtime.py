"""Runtime context helpers for command handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lintmap.core.config import load_config
from lintmap.languages.java.detectors.pmd_adapter import PMDManager
from lintmap.utils import PROJECT_ROOT, resolve_path


@dataclass(frozen=True)
class CommandRuntime:
    """Explicit runtime dependencies shared by command handlers."""

    config: dict[str, Any]


def command_runtime(args) -> CommandRuntime:
    """Return runtime context from explicit args.runtime or construct one."""
    runtime = getattr(args, "runtime", None)
    if isinstance(runtime, CommandRuntime):
        return runtime
    return CommandRuntime(config=load_config())


def pmd_manager(args) -> PMDManager:
    """Build a PMDManager from CLI flags, falling back to config values."""
    config = command_runtime(args).config
    path = getattr(args, "path", None) or str(PROJECT_ROOT)
    ruleset = getattr(args, "ruleset", None) or config.get("ruleset_path") or None
    return PMDManager(
        resolve_path(path),
        pmd_path=getattr(args, "pmd", None) or config.get("pmd_path"),
        config_path=resolve_path(ruleset) if ruleset else None,
        categories=config.get("categories"),
    )


__all__ = ["CommandRuntime", "command_runtime", "pmd_manager"]
