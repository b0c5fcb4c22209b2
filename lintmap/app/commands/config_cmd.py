"""config command: show/set/unset project configuration."""

from __future__ import annotations

import argparse
import sys

from lintmap.app.commands.helpers.runtime import command_runtime
from lintmap.core.config import (
    CONFIG_SCHEMA,
    save_config,
    set_config_value,
    unset_config_value,
)
from lintmap.core.fallbacks import print_error
from lintmap.utils import colorize


def cmd_config(args: argparse.Namespace) -> None:
    """Handle config subcommands: show, set, unset."""
    action = getattr(args, "config_action", None)
    if action == "set":
        _config_set(args)
    elif action == "unset":
        _config_unset(args)
    else:
        _config_show(args)


def _display(value) -> str:
    if isinstance(value, list):
        return ", ".join(value) if value else "(empty)"
    return str(value) if value != "" else "(empty)"


def _config_show(args):
    """Print all config keys with current values and descriptions."""
    config = command_runtime(args).config

    print(colorize("\n  lintmap Configuration\n", "bold"))
    for key, schema in CONFIG_SCHEMA.items():
        value = config.get(key, schema.default)
        default_tag = colorize(" (default)", "dim") if value == schema.default else ""
        print(f"  {key:<15} {_display(value)}{default_tag}")
        print(colorize(f"  {'':15} {schema.description}", "dim"))
    print()


def _config_set(args):
    """Set a config key to a value."""
    config = command_runtime(args).config
    key = args.config_key

    try:
        set_config_value(config, key, args.config_value)
    except (KeyError, ValueError) as e:
        print_error(str(e))
        sys.exit(1)

    try:
        save_config(config)
    except OSError as e:
        print_error(f"could not save config: {e}")
        sys.exit(1)
    print(colorize(f"  Set {key} = {_display(config[key])}", "green"))


def _config_unset(args):
    """Reset a config key to its default."""
    config = command_runtime(args).config
    key = args.config_key

    try:
        unset_config_value(config, key)
    except KeyError as e:
        print_error(str(e))
        sys.exit(1)

    try:
        save_config(config)
    except OSError as e:
        print_error(f"could not save config: {e}")
        sys.exit(1)
    print(colorize(f"  Reset {key} to default ({_display(CONFIG_SCHEMA[key].default)})", "green"))
