"""Tests for lintmap.cli — argument parsing and command routing."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

import lintmap.core.config as config_mod
import lintmap.utils as utils_mod
from lintmap.cli import create_parser, main
from lintmap.languages.java.detectors.pmd_adapter import PMDManager
from lintmap.languages.java.detectors.pmd_errors import PMD_RESULTS_ERROR, PMDResultsError
from lintmap.languages.java.detectors.pmd_rules import ALL_RULES

VIOLATIONS = [
    {"ruleId": "SystemPrintln", "message": {"text": "println"}, "level": "error"},
    {"ruleId": "GodClass", "message": {"text": "god"}, "level": "warning"},
]


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    path = tmp_path / ".lintmap" / "config.json"
    monkeypatch.setattr(config_mod, "CONFIG_FILE", path)
    return path


# ===========================================================================
# create_parser
# ===========================================================================


class TestCreateParser:
    @pytest.fixture()
    def parser(self):
        return create_parser()

    def test_scan_defaults(self, parser):
        args = parser.parse_args(["scan"])
        assert args.command == "scan"
        assert args.path is None
        assert args.pmd is None
        assert args.output is None
        assert args.verbose is False

    def test_generate_with_options(self, parser):
        args = parser.parse_args(
            ["--verbose", "generate", "--path", "src", "--ruleset", "pmd.xml", "--output", "out.xml"]
        )
        assert args.verbose is True
        assert args.path == "src"
        assert args.ruleset == "pmd.xml"
        assert args.output == "out.xml"

    def test_rules_category_choices(self, parser):
        with pytest.raises(SystemExit):
            parser.parse_args(["rules", "--category", "style"])

    def test_config_set(self, parser):
        args = parser.parse_args(["config", "set", "pmd_path", "/opt/pmd"])
        assert args.config_action == "set"
        assert args.config_key == "pmd_path"
        assert args.config_value == "/opt/pmd"

    def test_command_required(self, parser):
        with pytest.raises(SystemExit):
            parser.parse_args([])


# ===========================================================================
# Command routing
# ===========================================================================


class TestRules:
    def test_lists_category(self, capsys):
        main(["rules", "--category", "security"])
        assert capsys.readouterr().out.split() == ["HardCodedCryptoKey", "InsecureCryptoIv"]

    def test_full_ids(self, capsys):
        main(["rules", "--full"])
        lines = capsys.readouterr().out.split()
        assert len(lines) == len(ALL_RULES)
        assert all(line.startswith("category/java/") for line in lines)


class TestScan:
    def test_prints_sarif_log(self, tmp_path, capsys):
        with patch.object(PMDManager, "execute", return_value=VIOLATIONS) as execute:
            main(["scan", "--path", str(tmp_path), "--pmd", "/opt/pmd"])
        cmd = execute.call_args.args[0]
        assert cmd[:3] == ["/opt/pmd", "-d", str(tmp_path.resolve())]
        log = json.loads(capsys.readouterr().out)
        assert log["runs"][0]["results"] == VIOLATIONS

    def test_writes_output_file(self, tmp_path):
        out = tmp_path / "pmd.sarif"
        with patch.object(PMDManager, "execute", return_value=VIOLATIONS):
            main(["scan", "--path", str(tmp_path), "--output", str(out)])
        assert json.loads(out.read_text())["version"] == "2.1.0"

    def test_parse_failure_exits_with_message(self, tmp_path, capsys):
        with patch.object(PMDManager, "execute", side_effect=PMDResultsError()):
            with pytest.raises(SystemExit) as exc_info:
                main(["scan", "--path", str(tmp_path)])
        assert exc_info.value.code == 1
        assert PMD_RESULTS_ERROR in capsys.readouterr().err

    def test_missing_pmd_exits(self, tmp_path, capsys):
        with patch("subprocess.Popen", side_effect=FileNotFoundError("pmd")):
            with pytest.raises(SystemExit) as exc_info:
                main(["scan", "--path", str(tmp_path)])
        assert exc_info.value.code == 1
        assert "could not run PMD" in capsys.readouterr().err


class TestRulemap:
    def test_json_output(self, tmp_path, capsys):
        with patch.object(PMDManager, "execute", return_value=VIOLATIONS):
            main(["rulemap", "--path", str(tmp_path), "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["unfollowed"] == ["SystemPrintln", "GodClass"]
        assert len(data["followed"]) == len(ALL_RULES) - 2

    def test_table_output(self, tmp_path, capsys):
        with patch.object(PMDManager, "execute", return_value=VIOLATIONS):
            main(["rulemap", "--path", str(tmp_path)])
        out = capsys.readouterr().out
        assert "2 unfollowed" in out
        assert "GodClass" in out


class TestGenerate:
    def test_writes_ruleset(self, tmp_path):
        out = tmp_path / "pmd.xml"
        with patch.object(PMDManager, "execute", return_value=VIOLATIONS):
            main(["generate", "--path", str(tmp_path), "--output", str(out)])
        xml = out.read_text()
        assert xml.count("<rule ref=") == len(ALL_RULES) - 2
        assert "GodClass" not in xml

    def test_maintained_ruleset_keeps_rules(self, tmp_path, capsys):
        ruleset = tmp_path / "team.xml"
        ruleset.write_text('<ruleset><rule ref="category/java/design.xml/GodClass"/></ruleset>')
        with patch.object(PMDManager, "execute", return_value=VIOLATIONS):
            main(["generate", "--path", str(tmp_path), "--ruleset", str(ruleset)])
        xml = capsys.readouterr().out
        assert '<rule ref="category/java/design.xml/GodClass"/>' in xml
        assert "SystemPrintln" not in xml

    def test_configured_output_relative_to_project_root(self, tmp_path, monkeypatch):
        root = tmp_path / "project"
        elsewhere = tmp_path / "cwd"
        elsewhere.mkdir()
        monkeypatch.setattr(utils_mod, "PROJECT_ROOT", root)
        monkeypatch.chdir(elsewhere)
        main(["config", "set", "output_path", "config/pmd.xml"])
        with patch.object(PMDManager, "execute", return_value=VIOLATIONS):
            main(["generate", "--path", str(tmp_path)])
        assert (root / "config" / "pmd.xml").read_text().startswith("<?xml")
        assert not (elsewhere / "config").exists()

    def test_bad_ruleset_exits(self, tmp_path, capsys):
        ruleset = tmp_path / "team.xml"
        ruleset.write_text("<ruleset>")
        with patch.object(PMDManager, "execute", return_value=[]):
            with pytest.raises(SystemExit):
                main(["generate", "--path", str(tmp_path), "--ruleset", str(ruleset)])
        assert "Failed to parse PMD Config as XML." in capsys.readouterr().err


class TestConfigCommand:
    def test_set_then_show(self, isolated_config, capsys):
        main(["config", "set", "pmd_path", "/opt/pmd/bin/pmd"])
        assert json.loads(isolated_config.read_text())["pmd_path"] == "/opt/pmd/bin/pmd"
        main(["config", "show"])
        assert "/opt/pmd/bin/pmd" in capsys.readouterr().out

    def test_set_invalid_category_exits(self, capsys):
        with pytest.raises(SystemExit):
            main(["config", "set", "categories", "style"])
        assert "Expected comma-separated categories" in capsys.readouterr().err

    def test_configured_pmd_path_used(self, tmp_path):
        main(["config", "set", "pmd_path", "/custom/pmd"])
        with patch.object(PMDManager, "execute", return_value=[]) as execute:
            main(["scan", "--path", str(tmp_path)])
        assert execute.call_args.args[0][0] == "/custom/pmd"
