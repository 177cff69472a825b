# receipt_engine/config.py
import os
from dataclasses import dataclass
from typing import Optional


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    supplier_mode: str = "dictionary"
    log_level: str = "INFO"
    tesseract_cmd: Optional[str] = None
    poppler_path: Optional[str] = None
    ocr_lang: str = "nld+eng"
    ocr_timeout: int = 0
    output_mapping: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Read settings from the environment; unset variables keep defaults.
        """
        return cls(
            supplier_mode=os.getenv("RECEIPT_SUPPLIER_MODE", cls.supplier_mode).strip().lower(),
            log_level=os.getenv("RECEIPT_LOG_LEVEL", cls.log_level).strip().upper(),
            tesseract_cmd=os.getenv("TESSERACT_CMD") or None,
            poppler_path=os.getenv("POPPLER_PATH") or None,
            ocr_lang=os.getenv("OCR_LANG", cls.ocr_lang),
            ocr_timeout=_env_int("OCR_TIMEOUT", cls.ocr_timeout),
            output_mapping=os.getenv("RECEIPT_OUTPUT_MAPPING") or None,
        )
