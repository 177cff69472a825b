# receipt_engine/extractor.py
import logging
from typing import Dict, Iterable, Optional, Sequence

from receipt_engine.extractors.base import FieldScanner
from receipt_engine.extractors.record_id import RecordIdScanner
from receipt_engine.extractors.supplier import SupplierStrategy, get_supplier_strategy
from receipt_engine.extractors.weight import WeightScanner
from receipt_engine.models import ExtractionResult, LineSequence, to_line_sequence

logger = logging.getLogger(__name__)


class FieldExtractor:
    """
    Runs the record-id, supplier and weight scanners over one document.

    One left-to-right pass offers every line to each scanner that has not
    accepted a value yet. Scanners that end the pass without a usable value
    then get a single fallback pass of their own.
    """

    def __init__(self, supplier_strategy: Optional[SupplierStrategy] = None):
        self.supplier_strategy = supplier_strategy or get_supplier_strategy("dictionary")
        self.scanners: Sequence[FieldScanner] = (
            RecordIdScanner(),
            self.supplier_strategy,
            WeightScanner(),
        )

    def _primary_pass(self, lines: LineSequence) -> Dict[str, Optional[str]]:
        found: Dict[str, Optional[str]] = {s.field_name: None for s in self.scanners}
        for i in range(len(lines)):
            for s in self.scanners:
                if found[s.field_name] is not None:
                    continue
                val = s.scan(lines, i)
                if val is not None:
                    logger.debug("%s = %r (line %d)", s.field_name, val, i)
                    found[s.field_name] = val
        return found

    def _fallback_pass(self, lines: LineSequence, found: Dict[str, Optional[str]]) -> None:
        for s in self.scanners:
            if not s.needs_fallback(found[s.field_name]):
                continue
            val = s.fallback(lines)
            if val is not None:
                logger.debug("%s = %r (fallback)", s.field_name, val)
                found[s.field_name] = val

    def extract(self, lines: Iterable[str]) -> ExtractionResult:
        seq = to_line_sequence(lines)
        found = self._primary_pass(seq)
        self._fallback_pass(seq, found)
        return ExtractionResult(
            all_text=tuple(ln.text for ln in seq),
            record_id=found["record_id"],
            supplier_name=found["supplier_name"],
            weight=found["weight"],
        )


def run_extraction(lines: Iterable[str], supplier_mode: str = "dictionary") -> ExtractionResult:
    return FieldExtractor(get_supplier_strategy(supplier_mode)).extract(lines)
