"""Read and write PMD ruleset XML files."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from xml.sax.saxutils import quoteattr

from lintmap.languages.java.detectors.pmd_errors import (
    CONFIG_GENERATE_ERROR,
    CONFIG_PARSE_ERROR,
    CONFIG_READ_ERROR,
    CONFIG_XML_ERROR,
    PMDConfigError,
    PMDError,
)
from lintmap.languages.java.detectors.pmd_rules import make_full_rule_id

logger = logging.getLogger(__name__)

RULESET_NAMESPACE = "http://pmd.sourceforge.net/ruleset/2.0.0"
RULESET_SCHEMA_LOCATION = "https://pmd.sourceforge.io/ruleset_2_0_0.xsd"

RULESET_HEAD: tuple[str, ...] = (
    '<?xml version="1.0"?>',
    '<ruleset name="yourrule"',
    f'xmlns="{RULESET_NAMESPACE}"',
    'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"',
    f'xsi:schemaLocation="{RULESET_NAMESPACE} {RULESET_SCHEMA_LOCATION}">',
    "<description>Your configuration of PMD. Includes the rules that are most "
    "likely to apply for you.</description>",
)
RULESET_TAIL = "</ruleset>"


@dataclass
class PmdConfig:
    description: str = ""
    rules: list[str] = field(default_factory=list)
    # rule ref -> rule names listed in its <exclude name="..."/> children
    excludes: dict[str, list[str]] = field(default_factory=dict)


def _local_name(tag: str) -> str:
    """Strip an ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


def read_config(xml_path: str | Path) -> PmdConfig:
    """Read a PMD ruleset file into its rule references.

    Fails with PMDConfigError when the file can't be read, isn't well-formed
    XML, or isn't a ``<ruleset>`` document. No partial recovery.
    """
    try:
        contents = Path(xml_path).read_bytes()
    except OSError as exc:
        logger.debug("pmd config: cannot read %s: %s", xml_path, exc)
        raise PMDConfigError(CONFIG_READ_ERROR) from exc

    try:
        root = ET.fromstring(contents)
    except ET.ParseError as exc:
        logger.debug("pmd config: %s is not well-formed XML: %s", xml_path, exc)
        raise PMDConfigError(CONFIG_XML_ERROR) from exc

    if _local_name(root.tag) != "ruleset":
        logger.error("pmd config: %s has root <%s>, expected <ruleset>",
                     xml_path, _local_name(root.tag))
        raise PMDConfigError(CONFIG_PARSE_ERROR)

    config = PmdConfig()
    for child in root:
        name = _local_name(child.tag) if isinstance(child.tag, str) else ""
        if name == "description":
            config.description = (child.text or "").strip()
        elif name == "rule":
            ref = child.get("ref")
            if not ref:
                # Custom rule definitions carry name/class instead of ref.
                logger.debug("pmd config: skipping <rule> without ref (%s)",
                             child.get("name", "?"))
                continue
            ref = ref.strip()
            config.rules.append(ref)
            excluded = [
                ex.get("name").strip()
                for ex in child
                if isinstance(ex.tag, str)
                and _local_name(ex.tag) == "exclude"
                and (ex.get("name") or "").strip()
            ]
            if excluded:
                config.excludes.setdefault(ref, []).extend(excluded)
    return config


def collect_rule_ids_from_xml(xml_path: str | Path) -> list[str]:
    """Return every ``<rule ref>`` of a ruleset file, in document order."""
    return list(read_config(xml_path).rules)


def render_ruleset(followed: list[str]) -> str:
    """Build ruleset XML with one ``<rule ref>`` per followed rule."""
    try:
        refs = [make_full_rule_id(rule_id) for rule_id in followed]
    except KeyError as exc:
        logger.error("pmd config: no fully-qualified id for rule %s", exc)
        raise PMDError(CONFIG_GENERATE_ERROR) from exc
    rules = [f"<rule ref={quoteattr(ref)}/>" for ref in refs]
    return "\n".join([*RULESET_HEAD, *rules, RULESET_TAIL])


__all__ = [
    "PmdConfig",
    "RULESET_NAMESPACE",
    "collect_rule_ids_from_xml",
    "read_config",
    "render_ruleset",
]
