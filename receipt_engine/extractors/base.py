# receipt_engine/extractors/base.py
from typing import Optional

from receipt_engine.models import LineSequence


class FieldScanner:
    """
    One field's rules over a LineSequence.

    ``scan`` is called for every line of the primary pass until it accepts
    a value. ``fallback`` runs once afterwards, over the whole sequence,
    only when ``needs_fallback`` says the primary value is not good enough.
    Scanners hold no per-document state, so one instance serves any number
    of documents.
    """
    field_name = ""

    def scan(self, lines: LineSequence, i: int) -> Optional[str]:
        raise NotImplementedError

    def needs_fallback(self, value: Optional[str]) -> bool:
        return value is None

    def fallback(self, lines: LineSequence) -> Optional[str]:
        return None
