"""
Tests for the engine entrypoints and the command line
"""
import json
import logging

import pytest

from receipt_engine import cli, configure_logging, engine
from receipt_engine.config import Settings


@pytest.fixture
def receipt_txt(tmp_path):
    path = tmp_path / "bon.txt"
    path.write_text(
        "Transportbon\nDE123456 ABC\nLocatie van herkomst\nMarinierstraat 4\nMilieustraat Elst\nNetto: 2130 kg\n",
        encoding="utf-8",
    )
    return path


class TestEngine:

    def test_extract_lines_uses_settings_mode(self):
        out = engine.extract_lines(
            ["Locatie van herkomst", "Recyclinghal Oost"],
            settings=Settings(supplier_mode="layout"),
        )
        assert out["locatieVanHerkomst"] == "Recyclinghal Oost"

    def test_explicit_mode_beats_settings(self):
        out = engine.extract_lines(
            ["Locatie van herkomst", "Recyclinghal Oost"],
            supplier_mode="dictionary",
            settings=Settings(supplier_mode="layout"),
        )
        assert out["locatieVanHerkomst"] is None

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            engine.build_extractor(settings=Settings(supplier_mode="fuzzy"))

    def test_extract_document_runs_ocr(self, monkeypatch):
        monkeypatch.setattr(engine, "read_lines", lambda path, settings: ["TL123456", "2120"])
        out = engine.extract_document("bon.jpg", settings=Settings())
        assert out["recordId"] == "TL123456"
        assert out["weight"] == "2120"


class TestCli:

    def test_text_mode(self, receipt_txt, capsys, monkeypatch):
        monkeypatch.delenv("RECEIPT_OUTPUT_MAPPING", raising=False)
        assert cli.main([str(receipt_txt), "--text", "--mode", "layout"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["recordId"] == "DE123456"
        assert out["locatieVanHerkomst"] == "Milieustraat Elst"
        assert out["weight"] == "2130"
        assert len(out["allExtractedText"]) == 6

    def test_out_file(self, receipt_txt, tmp_path, monkeypatch):
        monkeypatch.delenv("RECEIPT_OUTPUT_MAPPING", raising=False)
        target = tmp_path / "out" / "bon.json"
        assert cli.main([str(receipt_txt), "--text", "--out", str(target)]) == 0
        saved = json.loads(target.read_text(encoding="utf-8"))
        assert saved["locatieVanHerkomst"] == "Milieustraat Elst"

    def test_missing_file(self, tmp_path, capsys):
        assert cli.main([str(tmp_path / "nope.txt"), "--text"]) == 2
        assert "error" in capsys.readouterr().err

    def test_bad_mode_rejected_by_parser(self, receipt_txt):
        with pytest.raises(SystemExit):
            cli.main([str(receipt_txt), "--text", "--mode", "fuzzy"])

    def test_missing_mapping_file_fails(self, receipt_txt, tmp_path, capsys, monkeypatch):
        monkeypatch.setenv("RECEIPT_OUTPUT_MAPPING", str(tmp_path / "nope.json"))
        assert cli.main([str(receipt_txt), "--text"]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Mapping config not found" in captured.err

    def test_log_level_from_settings(self, receipt_txt, monkeypatch):
        package_logger = logging.getLogger("receipt_engine")
        previous = package_logger.level
        monkeypatch.delenv("RECEIPT_OUTPUT_MAPPING", raising=False)
        monkeypatch.setenv("RECEIPT_LOG_LEVEL", "debug")
        try:
            assert cli.main([str(receipt_txt), "--text"]) == 0
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)


class TestConfigureLogging:

    def test_known_and_unknown_names(self):
        package_logger = logging.getLogger("receipt_engine")
        previous = package_logger.level
        try:
            assert configure_logging("warning") == logging.WARNING
            assert package_logger.level == logging.WARNING
            assert configure_logging("chatty") == logging.INFO
        finally:
            package_logger.setLevel(previous)
