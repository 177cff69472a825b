# receipt_engine/__init__.py
import logging

from receipt_engine.extractor import FieldExtractor, run_extraction
from receipt_engine.models import ExtractionResult, KnownSupplier, TextLine

# -------------------------
# Logging
# -------------------------
logger = logging.getLogger(__name__)
if not logger.handlers:
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(h)
logger.setLevel(logging.INFO)


def configure_logging(level: str) -> int:
    """Set the package log level by name; unknown names fall back to INFO."""
    lvl = logging.getLevelName((level or "").strip().upper())
    if not isinstance(lvl, int):
        lvl = logging.INFO
    logger.setLevel(lvl)
    return lvl


__all__ = [
    "ExtractionResult",
    "FieldExtractor",
    "KnownSupplier",
    "TextLine",
    "configure_logging",
    "run_extraction",
]
