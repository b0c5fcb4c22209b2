"""PMD adapter — Java lint results and ruleset generation via the pmd CLI.

Runs ``pmd -d <dir> -f csv -rulesets category/java/<category>.xml,...`` as a
subprocess and converts its CSV report into SARIF result dicts.

stdout is consumed chunk by chunk as PMD writes it. Every chunk is parsed on
its own and the batch it yields replaces the previous one; the caller gets
whatever batch was produced last when the process exits. stderr is forwarded
line by line to this module's logger.

There is no timeout and no retry: a hung PMD hangs the caller, and a missing
executable is logged and re-raised.
"""

from __future__ import annotations

import codecs
import logging
import subprocess
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import IO, Any

from lintmap.engine.lint_manager import LintManager
from lintmap.engine.rule_map import RuleMap
from lintmap.engine.sarif import make_result
from lintmap.languages.java.detectors.pmd_csv import PmdResult, parse_pmd_csv
from lintmap.languages.java.detectors.pmd_rules import (
    ALL_RULES,
    PMD_CATEGORIES,
    category_ruleset,
    expand_rule_ref,
)
from lintmap.languages.java.detectors.pmd_ruleset import (
    read_config,
    render_ruleset,
)

logger = logging.getLogger(__name__)

DEFAULT_PMD_PATH = "pmd"
_CHUNK_SIZE = 64 * 1024

# PMD priority (1 = highest) → SARIF level
_PRIORITY_TO_LEVEL = {
    "1": "error",
    "2": "error",
    "3": "warning",
    "4": "note",
    "5": "note",
}


def pmd_results_to_sarif(pmd_results: Iterable[PmdResult]) -> list[dict[str, Any]]:
    """Convert parsed PMD rows into SARIF result dicts."""
    output: list[dict[str, Any]] = []
    for pmd_result in pmd_results:
        line = pmd_result.line.strip()
        output.append(
            make_result(
                pmd_result.rule,
                pmd_result.description,
                level=_PRIORITY_TO_LEVEL.get(pmd_result.priority.strip()),
                uri=pmd_result.file or None,
                start_line=int(line) if line.isdigit() else None,
            )
        )
    return output


def make_pmd_command(
    dir_name: str,
    pmd_path: str = DEFAULT_PMD_PATH,
    categories: Iterable[str] = PMD_CATEGORIES,
) -> list[str]:
    """Build the argv for a CSV-format PMD run over every given category."""
    rulesets = ",".join(category_ruleset(c) for c in categories)
    return [pmd_path, "-d", dir_name, "-f", "csv", "-rulesets", rulesets]


def _drain_stderr(stream: IO[bytes]) -> None:
    for raw in iter(stream.readline, b""):
        line = raw.decode("utf-8", errors="replace").rstrip()
        if line:
            logger.warning("pmd: %s", line)


class PMDManager(LintManager):
    """LintManager for PMD's Java rules."""

    def __init__(
        self,
        project_path: str | Path,
        pmd_path: str | None = None,
        config_path: str | Path | None = None,
        categories: Iterable[str] | None = None,
    ) -> None:
        super().__init__(project_path)
        self.pmd_path = pmd_path or DEFAULT_PMD_PATH
        self.config_path = config_path
        self.categories = tuple(categories) if categories else PMD_CATEGORIES

    def command(self) -> list[str]:
        return make_pmd_command(self.project_path, self.pmd_path, self.categories)

    def execute(self, cmd: list[str]) -> list[dict[str, Any]]:
        """Run ``cmd`` and return the SARIF results of the last stdout chunk."""
        logger.debug("pmd: running %s", " ".join(cmd))
        try:
            proc = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
        except OSError as exc:
            logger.error("pmd: failed to start %s: %s", cmd[0], exc)
            raise

        stderr_thread = threading.Thread(
            target=_drain_stderr, args=(proc.stderr,), daemon=True
        )
        stderr_thread.start()

        result: list[dict[str, Any]] = []
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        chunks = 0
        try:
            while True:
                data = proc.stdout.read1(_CHUNK_SIZE)
                if not data:
                    break
                chunks += 1
                result = pmd_results_to_sarif(parse_pmd_csv(decoder.decode(data)))
            returncode = proc.wait()
        except BaseException:
            proc.kill()
            proc.wait()
            raise
        finally:
            stderr_thread.join()
            proc.stdout.close()
            proc.stderr.close()

        logger.debug(
            "pmd: exited %s after %d stdout chunk(s), %d result(s)",
            returncode, chunks, len(result),
        )
        return result

    def get_available_rules(self) -> list[str]:
        return list(ALL_RULES)

    def enabled_rules(self) -> list[str]:
        """Short IDs enabled by the maintained ruleset, minus its excludes."""
        if not self.config_path:
            return []
        config = read_config(self.config_path)
        enabled: list[str] = []
        for ref in config.rules:
            excluded = set(config.excludes.get(ref, ()))
            enabled.extend(r for r in expand_rule_ref(ref) if r not in excluded)
        return enabled

    def make_rule_map(self) -> RuleMap:
        results = self.execute(self.command())
        unfollowed = self.results_to_warnings(results)
        return RuleMap(self.get_available_rules(), unfollowed, self.enabled_rules())

    def make_config_file(self) -> str:
        return render_ruleset(self.make_rule_map().followed)


__all__ = [
    "DEFAULT_PMD_PATH",
    "PMDManager",
    "make_pmd_command",
    "pmd_results_to_sarif",
]
