# engine.py
from typing import Any, Dict, Iterable, Optional

from receipt_engine.config import Settings
from receipt_engine.extractor import FieldExtractor
from receipt_engine.extractors.supplier import get_supplier_strategy
from receipt_engine.ocr import read_lines
from receipt_engine.transformers import transform


def build_extractor(supplier_mode: Optional[str] = None, settings: Optional[Settings] = None) -> FieldExtractor:
    settings = settings or Settings.from_env()
    return FieldExtractor(get_supplier_strategy(supplier_mode or settings.supplier_mode))


def extract_lines(lines: Iterable[str],
                  supplier_mode: Optional[str] = None,
                  settings: Optional[Settings] = None) -> Dict[str, Any]:
    """
    Lines already recognized elsewhere -> mapped output record.
    """
    settings = settings or Settings.from_env()
    result = build_extractor(supplier_mode, settings).extract(lines)
    return transform(result, settings.output_mapping)


def extract_document(path: str,
                     supplier_mode: Optional[str] = None,
                     settings: Optional[Settings] = None) -> Dict[str, Any]:
    """
    Image or PDF on disk -> Tesseract lines -> mapped output record.
    """
    settings = settings or Settings.from_env()
    return extract_lines(read_lines(path, settings), supplier_mode, settings)
