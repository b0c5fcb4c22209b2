"""Tests for reading and rendering PMD ruleset XML."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from lintmap.languages.java.detectors.pmd_errors import (
    CONFIG_GENERATE_ERROR,
    CONFIG_PARSE_ERROR,
    CONFIG_READ_ERROR,
    CONFIG_XML_ERROR,
    PMDConfigError,
    PMDError,
)
from lintmap.languages.java.detectors.pmd_ruleset import (
    RULESET_NAMESPACE,
    collect_rule_ids_from_xml,
    read_config,
    render_ruleset,
)

RULESET = """<?xml version="1.0"?>
<ruleset name="team"
    xmlns="http://pmd.sourceforge.net/ruleset/2.0.0"
    xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
    xsi:schemaLocation="http://pmd.sourceforge.net/ruleset/2.0.0 https://pmd.sourceforge.io/ruleset_2_0_0.xsd">
  <description>Team rules</description>
  <rule ref="category/java/bestpractices.xml/SystemPrintln"/>
  <rule ref="category/java/design.xml/GodClass"/>
  <rule ref="category/java/documentation.xml"/>
</ruleset>
"""


def _write(tmp_path, text, name="pmd.xml"):
    p = tmp_path / name
    p.write_text(text)
    return p


# ===========================================================================
# read_config / collect_rule_ids_from_xml
# ===========================================================================


class TestReadConfig:
    def test_reads_rule_refs_in_order(self, tmp_path):
        p = _write(tmp_path, RULESET)
        assert collect_rule_ids_from_xml(p) == [
            "category/java/bestpractices.xml/SystemPrintln",
            "category/java/design.xml/GodClass",
            "category/java/documentation.xml",
        ]

    def test_reads_description(self, tmp_path):
        config = read_config(_write(tmp_path, RULESET))
        assert config.description == "Team rules"

    def test_single_rule(self, tmp_path):
        p = _write(tmp_path, '<ruleset><rule ref="category/java/design.xml/GodClass"/></ruleset>')
        assert collect_rule_ids_from_xml(p) == ["category/java/design.xml/GodClass"]

    def test_without_namespace(self, tmp_path):
        p = _write(
            tmp_path,
            '<ruleset name="x"><rule ref="a/b.xml/One"/><rule ref="a/b.xml/Two"/></ruleset>',
        )
        assert collect_rule_ids_from_xml(p) == ["a/b.xml/One", "a/b.xml/Two"]

    def test_rule_without_ref_skipped(self, tmp_path):
        p = _write(
            tmp_path,
            '<ruleset><rule name="Custom" class="com.example.CustomRule"/>'
            '<rule ref="category/java/design.xml/GodClass"/></ruleset>',
        )
        assert collect_rule_ids_from_xml(p) == ["category/java/design.xml/GodClass"]

    def test_reads_excludes_per_ref(self, tmp_path):
        p = _write(
            tmp_path,
            '<ruleset xmlns="http://pmd.sourceforge.net/ruleset/2.0.0">'
            '<rule ref="category/java/design.xml">'
            '<exclude name="GodClass"/><exclude name="DataClass"/></rule>'
            '<rule ref="category/java/bestpractices.xml/SystemPrintln"/></ruleset>',
        )
        config = read_config(p)
        assert config.rules == [
            "category/java/design.xml",
            "category/java/bestpractices.xml/SystemPrintln",
        ]
        assert config.excludes == {"category/java/design.xml": ["GodClass", "DataClass"]}

    def test_empty_ruleset(self, tmp_path):
        assert collect_rule_ids_from_xml(_write(tmp_path, "<ruleset/>")) == []

    def test_missing_file_fails(self, tmp_path):
        with pytest.raises(PMDConfigError) as exc_info:
            read_config(tmp_path / "missing.xml")
        assert str(exc_info.value) == CONFIG_READ_ERROR

    def test_malformed_xml_fails(self, tmp_path):
        p = _write(tmp_path, '<ruleset><rule ref="x"></ruleset>')
        with pytest.raises(PMDConfigError) as exc_info:
            read_config(p)
        assert str(exc_info.value) == CONFIG_XML_ERROR

    def test_not_xml_fails(self, tmp_path):
        with pytest.raises(PMDConfigError) as exc_info:
            read_config(_write(tmp_path, "just some text"))
        assert str(exc_info.value) == CONFIG_XML_ERROR

    def test_wrong_root_fails(self, tmp_path):
        p = _write(tmp_path, "<project><rule ref='x'/></project>")
        with pytest.raises(PMDConfigError) as exc_info:
            read_config(p)
        assert str(exc_info.value) == CONFIG_PARSE_ERROR


# ===========================================================================
# render_ruleset
# ===========================================================================


class TestRenderRuleset:
    def test_one_rule_element_per_followed_rule(self):
        xml = render_ruleset(["SystemPrintln", "GodClass"])
        root = ET.fromstring(xml)
        refs = [r.get("ref") for r in root.findall(f"{{{RULESET_NAMESPACE}}}rule")]
        assert refs == [
            "category/java/bestpractices.xml/SystemPrintln",
            "category/java/design.xml/GodClass",
        ]

    def test_fixed_header_and_footer(self):
        xml = render_ruleset([])
        lines = xml.split("\n")
        assert lines[0] == '<?xml version="1.0"?>'
        assert lines[1] == '<ruleset name="yourrule"'
        assert lines[-1] == "</ruleset>"
        assert "https://pmd.sourceforge.io/ruleset_2_0_0.xsd" in xml
        assert "<description>Your configuration of PMD." in xml

    def test_full_ids_pass_through(self):
        xml = render_ruleset(["category/java/design.xml/GodClass"])
        assert '<rule ref="category/java/design.xml/GodClass"/>' in xml

    def test_rendered_file_reads_back(self, tmp_path):
        p = _write(tmp_path, render_ruleset(["UnusedImports", "HardCodedCryptoKey"]))
        assert collect_rule_ids_from_xml(p) == [
            "category/java/bestpractices.xml/UnusedImports",
            "category/java/security.xml/HardCodedCryptoKey",
        ]

    def test_unknown_rule_fails(self):
        with pytest.raises(PMDError) as exc_info:
            render_ruleset(["NoSuchRule"])
        assert str(exc_info.value) == CONFIG_GENERATE_ERROR
