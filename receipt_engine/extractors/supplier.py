# receipt_engine/extractors/supplier.py
# -------------------------------------------------------------
# Supplier / origin location resolution strategies
#   dictionary : match against the known-site catalog
#   layout     : read the lines under the "Locatie van herkomst" label
# -------------------------------------------------------------

import logging
from typing import Iterator, Optional, Sequence

from receipt_engine.catalog import KNOWN_SUPPLIERS
from receipt_engine.extractors.base import FieldScanner
from receipt_engine.models import KnownSupplier, LineSequence
from receipt_engine.patterns import (
    contains_word,
    is_origin_label,
    looks_like_address,
    value_after_origin_label,
)

logger = logging.getLogger(__name__)


class SupplierStrategy(FieldScanner):
    field_name = "supplier_name"


class DictionarySupplierStrategy(SupplierStrategy):
    """
    Full canonical name (case-insensitive substring) on the primary pass;
    if no line names a site outright, a second pass looks for each site's
    place names and brand tokens as whole words.
    """

    def __init__(self, catalog: Sequence[KnownSupplier] = KNOWN_SUPPLIERS):
        self.catalog = tuple(catalog)

    def scan(self, lines: LineSequence, i: int) -> Optional[str]:
        lower = lines[i].text.lower()
        for entry in self.catalog:
            if entry.canonical_name.lower() in lower:
                return entry.canonical_name
        return None

    def fallback(self, lines: LineSequence) -> Optional[str]:
        for ln in lines:
            for entry in self.catalog:
                # sorted so the winning keyword is the same on every run
                for kw in sorted(entry.keywords):
                    if contains_word(ln.text, kw):
                        logger.debug("Supplier %r via keyword %r on line %d", entry.canonical_name, kw, ln.index)
                        return entry.canonical_name
        return None


class LayoutSupplierStrategy(SupplierStrategy):
    """The first non-address line in the window under the origin label."""

    def __init__(self, window: int = 3):
        self.window = window

    def _candidates(self, lines: LineSequence, i: int) -> Iterator[str]:
        same_line = value_after_origin_label(lines[i].text)
        if same_line:
            yield same_line
        for ln in lines[i + 1:i + 1 + self.window]:
            yield ln.text.strip()

    def scan(self, lines: LineSequence, i: int) -> Optional[str]:
        if not is_origin_label(lines[i].text):
            return None
        for cand in self._candidates(lines, i):
            if not looks_like_address(cand):
                return cand
            logger.debug("Skipped origin candidate %r", cand)
        return None


SUPPLIER_STRATEGIES = {
    "dictionary": DictionarySupplierStrategy,
    "layout": LayoutSupplierStrategy,
}


def get_supplier_strategy(mode: str) -> SupplierStrategy:
    key = (mode or "").strip().lower()
    if key not in SUPPLIER_STRATEGIES:
        raise ValueError(f"No supplier strategy '{mode}', expected one of {sorted(SUPPLIER_STRATEGIES)}")
    return SUPPLIER_STRATEGIES[key]()
