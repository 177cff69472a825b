# receipt_engine/extractors/weight.py
# -------------------------------------------------------------
# Weight: net label -> weighed/quantity label -> "<n> kg" -> bare number
# -------------------------------------------------------------

import logging
from typing import Optional

from receipt_engine.extractors.base import FieldScanner
from receipt_engine.models import LineSequence
from receipt_engine.patterns import (
    has_measured_label,
    is_positive_weight,
    match_bare_number,
    match_net_weight,
    match_standalone_weight,
    match_trailing_number,
    match_unit_weight,
)

logger = logging.getLogger(__name__)


def net_weight_tier(lines: LineSequence, i: int) -> Optional[str]:
    return match_net_weight(lines[i].text)


def measured_weight_tier(lines: LineSequence, i: int) -> Optional[str]:
    """
    "Gewogen hoeveelheid 1532,5", or the label alone with nothing but the
    value (and unit) on the next line. Only values that parse to a positive
    number count.
    """
    if not has_measured_label(lines[i].text):
        return None
    val = match_trailing_number(lines[i].text)
    if val is None and i + 1 < len(lines):
        val = match_bare_number(lines[i + 1].text)
    if val is None:
        return None
    if not is_positive_weight(val):
        logger.debug("Rejected measured weight %r on line %d", val, i)
        return None
    return val


def unit_weight_tier(lines: LineSequence, i: int) -> Optional[str]:
    return match_unit_weight(lines[i].text)


WEIGHT_TIERS = (
    ("net", net_weight_tier),
    ("measured", measured_weight_tier),
    ("unit", unit_weight_tier),
)


class WeightScanner(FieldScanner):
    field_name = "weight"

    def scan(self, lines: LineSequence, i: int) -> Optional[str]:
        for tier, rule in WEIGHT_TIERS:
            val = rule(lines, i)
            if val is not None:
                logger.debug("Weight %r from %s tier on line %d", val, tier, i)
                return val
        return None

    def needs_fallback(self, value: Optional[str]) -> bool:
        # a literal zero is as good as nothing
        return value is None or value == "0"

    def fallback(self, lines: LineSequence) -> Optional[str]:
        for ln in lines:
            val = match_standalone_weight(ln.text)
            if val:
                return val
        return None
