# receipt_engine/extractors/record_id.py
from typing import Optional

from receipt_engine.extractors.base import FieldScanner
from receipt_engine.models import LineSequence
from receipt_engine.patterns import match_record_id_fallback, match_record_id_preferred


class RecordIdScanner(FieldScanner):
    """Known-prefix IDs (DE/AR/TL + 6 digits) first; any two letters only if none exist."""
    field_name = "record_id"

    def scan(self, lines: LineSequence, i: int) -> Optional[str]:
        return match_record_id_preferred(lines[i].text)

    def fallback(self, lines: LineSequence) -> Optional[str]:
        for ln in lines:
            val = match_record_id_fallback(ln.text)
            if val:
                return val
        return None
