# receipt_engine/patterns.py
# -------------------------------------------------------------
# Line-level patterns and validators, one per field rule.
# Every function looks at a single line of OCR text and returns
# the matched span (as written on the receipt) or None.
# -------------------------------------------------------------

import math
import re
from typing import Iterable, Optional

# -------------------------
# Record ID
# -------------------------
RECORD_ID_PREFIXES = ("DE", "AR", "TL")

# digit run must be complete and not glued to a trailing letter
_DIGITS_TAIL = r'\d{6,}(?![A-Za-z0-9])'

_RE_RECORD_ID_PREFERRED = re.compile(
    r'\b(?:' + '|'.join(RECORD_ID_PREFIXES) + r')' + _DIGITS_TAIL,
    re.IGNORECASE,
)
_RE_RECORD_ID_FALLBACK = re.compile(r'\b[A-Za-z]{2}' + _DIGITS_TAIL)


def match_record_id_preferred(text: str) -> Optional[str]:
    m = _RE_RECORD_ID_PREFERRED.search(text or "")
    return m.group(0) if m else None


def match_record_id_fallback(text: str) -> Optional[str]:
    m = _RE_RECORD_ID_FALLBACK.search(text or "")
    return m.group(0) if m else None


# -------------------------
# Weight
# -------------------------
NUM = r'\d+(?:[.,]\d+)?'

NET_MARKERS = ("netto", "net")
MEASURED_MARKERS = ("gewogen", "weighed", "hoeveelheid", "quantity")
WEIGHT_UNITS = ("kilogram", "kilo", "kgs", "kg")

_RE_NET_WEIGHT = re.compile(
    r'\b(?:' + '|'.join(NET_MARKERS) + r')(?:\s*-?\s*(?:gewicht|weight))?[:\s]*(' + NUM + r')',
    re.IGNORECASE,
)
_RE_MEASURED_LABEL = re.compile(r'\b(?:' + '|'.join(MEASURED_MARKERS) + r')', re.IGNORECASE)
_RE_TRAILING_NUMBER = re.compile(r'(?<![\d.,])(' + NUM + r')\s*(?:' + '|'.join(WEIGHT_UNITS) + r')?\.?\s*$', re.IGNORECASE)
_RE_BARE_NUMBER = re.compile(r'(' + NUM + r')\s*(?:' + '|'.join(WEIGHT_UNITS) + r')?\.?', re.IGNORECASE)
_RE_UNIT_WEIGHT = re.compile(r'(?<![\d.,])(' + NUM + r')\s?(?:' + '|'.join(WEIGHT_UNITS) + r')\b', re.IGNORECASE)
_RE_STANDALONE = re.compile(r'\d{3,5}')

FALLBACK_MIN = 100
FALLBACK_MAX = 100000


def parse_weight(value: str) -> Optional[float]:
    """Comma or period decimal → float; None when it does not parse."""
    if not value:
        return None
    try:
        return float(value.strip().replace(',', '.'))
    except ValueError:
        return None


def is_positive_weight(value: str) -> bool:
    num = parse_weight(value)
    return num is not None and math.isfinite(num) and num > 0


def match_net_weight(text: str) -> Optional[str]:
    m = _RE_NET_WEIGHT.search(text or "")
    return m.group(1) if m else None


def has_measured_label(text: str) -> bool:
    return bool(_RE_MEASURED_LABEL.search(text or ""))


def match_trailing_number(text: str) -> Optional[str]:
    m = _RE_TRAILING_NUMBER.search(text or "")
    return m.group(1) if m else None


def match_bare_number(text: str) -> Optional[str]:
    """A line holding only a number, optionally with a weight unit."""
    m = _RE_BARE_NUMBER.fullmatch((text or "").strip())
    return m.group(1) if m else None


def match_unit_weight(text: str) -> Optional[str]:
    m = _RE_UNIT_WEIGHT.search(text or "")
    return m.group(1) if m else None


def match_standalone_weight(text: str) -> Optional[str]:
    """A line that is nothing but 3-5 digits, within the plausible range."""
    s = (text or "").strip()
    if not _RE_STANDALONE.fullmatch(s):
        return None
    if FALLBACK_MIN <= int(s) <= FALLBACK_MAX:
        return s
    return None


# -------------------------
# Supplier (layout mode)
# -------------------------
LOCATION_MARKERS = ("locatie", "location")
ORIGIN_MARKERS = ("herkomst", "origin")

FIELD_LABELS = (
    "straat+nr", "straat + nr", "huisnummer", "postcode", "woonplaats", "adres",
    "street+no", "street + no", "postal", "residence",
)

_RE_POSTAL_CODE = re.compile(r'^\d{4}\s?[A-Za-z]{2}\b')
_RE_ENDS_IN_DIGITS = re.compile(r'\d$')
_RE_LABEL_MARKER = re.compile(r'(?:' + '|'.join(LOCATION_MARKERS + ORIGIN_MARKERS) + r')', re.IGNORECASE)
# words that only glue the label together ("locatie van herkomst", "location of origin")
_RE_LABEL_FILLER = re.compile(r'\b(?:van|of|de|the)\b', re.IGNORECASE)


def _contains_any(lower: str, tokens: Iterable[str]) -> bool:
    return any(t in lower for t in tokens)


def is_origin_label(text: str) -> bool:
    lower = (text or "").lower()
    return _contains_any(lower, LOCATION_MARKERS) and _contains_any(lower, ORIGIN_MARKERS)


def value_after_origin_label(text: str) -> Optional[str]:
    """
    Value written on the label line itself: after the colon, or after the
    last label word when there is no colon. None when only label words
    remain.
    """
    s = text or ""
    if ":" in s:
        rest = s.split(":", 1)[1]
    else:
        markers = list(_RE_LABEL_MARKER.finditer(s))
        if not markers:
            return None
        rest = s[markers[-1].end():]
    val = rest.strip(" \t:-")
    # "Origin location:" / "Herkomstlocatie" leave only label words behind
    leftover = _RE_LABEL_FILLER.sub("", _RE_LABEL_MARKER.sub("", val))
    if not leftover.strip(" \t:-"):
        return None
    return val


def looks_like_address(text: str) -> bool:
    """True for street lines, postal-code lines, bare numbers and other labels."""
    s = (text or "").strip()
    if len(s) < 3:
        return True
    if s.isdigit():
        return True
    if _RE_ENDS_IN_DIGITS.search(s):
        return True
    if _RE_POSTAL_CODE.match(s):
        return True
    return _contains_any(s.lower(), FIELD_LABELS)


def contains_word(text: str, word: str) -> bool:
    """Case-insensitive whole-word containment."""
    return re.search(r'\b' + re.escape(word) + r'\b', text or "", re.IGNORECASE) is not None
