"""
Tests for environment-backed settings
"""
import pytest

from receipt_engine.config import Settings

ENV_VARS = (
    "RECEIPT_SUPPLIER_MODE", "RECEIPT_LOG_LEVEL", "TESSERACT_CMD",
    "POPPLER_PATH", "OCR_LANG", "OCR_TIMEOUT", "RECEIPT_OUTPUT_MAPPING",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:

    def test_defaults(self, clean_env):
        s = Settings.from_env()
        assert s == Settings()
        assert s.supplier_mode == "dictionary"
        assert s.ocr_timeout == 0

    def test_overrides(self, clean_env):
        clean_env.setenv("RECEIPT_SUPPLIER_MODE", " Layout ")
        clean_env.setenv("OCR_TIMEOUT", "30")
        clean_env.setenv("TESSERACT_CMD", "/opt/tess")
        s = Settings.from_env()
        assert s.supplier_mode == "layout"
        assert s.ocr_timeout == 30
        assert s.tesseract_cmd == "/opt/tess"

    def test_empty_values_fall_back(self, clean_env):
        clean_env.setenv("POPPLER_PATH", "")
        clean_env.setenv("OCR_TIMEOUT", " ")
        s = Settings.from_env()
        assert s.poppler_path is None
        assert s.ocr_timeout == 0

    def test_bad_timeout(self, clean_env):
        clean_env.setenv("OCR_TIMEOUT", "soon")
        with pytest.raises(ValueError):
            Settings.from_env()
