"""CLI entry point: argparse, subcommand routing, error reporting."""

import argparse
import logging
import sys

from lintmap.languages.java.detectors.pmd_rules import PMD_CATEGORIES

USAGE_EXAMPLES = """
workflow:
  scan                          Run PMD and print results as SARIF
  rulemap                       Show followed / unfollowed PMD rules
  generate                      Write a PMD ruleset of the rules already followed
  rules                         List the PMD Java rule catalog
  config                        Show or change lintmap settings

examples:
  lintmap scan --path src/main/java --output pmd.sarif
  lintmap rulemap --ruleset config/pmd.xml
  lintmap generate --ruleset config/pmd.xml --output config/pmd.xml
  lintmap rules --category design --full
  lintmap config set pmd_path /opt/pmd/bin/pmd
"""


def _add_pmd_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--path", type=str, default=None,
                   help="Directory PMD analyses (default: project root)")
    p.add_argument("--pmd", type=str, default=None, metavar="EXE",
                   help="PMD executable (default: config pmd_path)")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lintmap",
        description="lintmap — PMD results as SARIF, PMD rulesets from what you follow",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_scan = sub.add_parser("scan", help="Run PMD and print results as SARIF")
    _add_pmd_args(p_scan)
    p_scan.add_argument("--output", type=str, metavar="FILE",
                        help="Write SARIF to file instead of stdout")

    p_rulemap = sub.add_parser("rulemap", help="Show followed / unfollowed PMD rules")
    _add_pmd_args(p_rulemap)
    p_rulemap.add_argument("--ruleset", type=str, default=None, metavar="FILE",
                           help="Maintained ruleset whose rules count as enabled")
    p_rulemap.add_argument("--json", action="store_true")

    p_generate = sub.add_parser("generate", help="Generate a PMD ruleset XML file")
    _add_pmd_args(p_generate)
    p_generate.add_argument("--ruleset", type=str, default=None, metavar="FILE",
                            help="Maintained ruleset whose rules count as enabled")
    p_generate.add_argument("--output", type=str, metavar="FILE",
                            help="Write XML to file instead of stdout")

    p_rules = sub.add_parser("rules", help="List the PMD Java rule catalog")
    p_rules.add_argument("--category", choices=list(PMD_CATEGORIES), default=None)
    p_rules.add_argument("--full", action="store_true", help="Print fully-qualified rule IDs")

    p_config = sub.add_parser("config", help="Show or change lintmap settings")
    config_sub = p_config.add_subparsers(dest="config_action")
    config_sub.add_parser("show", help="Show all settings")
    c_set = config_sub.add_parser("set", help="Set a setting")
    c_set.add_argument("config_key")
    c_set.add_argument("config_value")
    c_unset = config_sub.add_parser("unset", help="Reset a setting to its default")
    c_unset.add_argument("config_key")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Lazy-load command handlers
    from lintmap.app.commands.config_cmd import cmd_config
    from lintmap.app.commands.generate_cmd import cmd_generate
    from lintmap.app.commands.rulemap_cmd import cmd_rulemap
    from lintmap.app.commands.rules_cmd import cmd_rules
    from lintmap.app.commands.scan_cmd import cmd_scan
    from lintmap.core.fallbacks import print_error
    from lintmap.languages.java.detectors.pmd_errors import PMDError

    commands = {
        "scan": cmd_scan,
        "rulemap": cmd_rulemap,
        "generate": cmd_generate,
        "rules": cmd_rules,
        "config": cmd_config,
    }

    try:
        commands[args.command](args)
    except PMDError as e:
        print_error(str(e))
        sys.exit(1)
    except OSError as e:
        print_error(f"could not run PMD: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted.")
        sys.exit(1)


if __name__ == "__main__":
    main()
