# receipt_engine/catalog.py
"""
Known supplier sites (collection points the material originates from).

The catalog is built once at import and never mutated. Each entry carries
the keywords used by the second, looser dictionary pass: the place names
found inside its canonical name plus any brand tokens it contains.
"""

import re
from typing import Iterable, Tuple

from receipt_engine.models import KnownSupplier

# catalog order is the tie-break when one line matches several entries
SUPPLIER_NAMES = (
    "Milieustraat Elst",
    "Milieustraat Arnhem Noord",
    "Milieustraat Arnhem Zuid",
    "Milieustraat Bemmel",
    "Milieustraat Huissen",
    "Milieustraat Zevenaar",
    "Milieustraat Duiven",
    "Milieustraat Westervoort",
    "Milieustraat Wijchen",
    "Milieustraat Tiel",
    "Afvalbrengstation Nijmegen Noord",
    "ARN Weurt",
    "Sortiva Nijmegen",
    "Gemeentewerf Lingewaard Gendt",
    "Avri Geldermalsen",
    "Avri Culemborg",
)

LOCATION_NAMES = (
    "Arnhem", "Elst", "Bemmel", "Huissen", "Zevenaar", "Duiven",
    "Westervoort", "Wijchen", "Tiel", "Nijmegen", "Weurt", "Gendt",
    "Lingewaard", "Geldermalsen", "Culemborg",
)

# organisation names and abbreviations that identify one site on their own
BRAND_TOKENS = ("ARN", "Sortiva", "Avri")


def derive_location_keywords(name: str, locations: Iterable[str] = LOCATION_NAMES) -> frozenset:
    lower = name.lower()
    return frozenset(loc for loc in locations if loc.lower() in lower)


def derive_unique_tokens(name: str, brands: Iterable[str] = BRAND_TOKENS) -> frozenset:
    return frozenset(
        b for b in brands
        if re.search(r'\b' + re.escape(b) + r'\b', name, re.IGNORECASE)
    )


def build_catalog(names: Iterable[str] = SUPPLIER_NAMES) -> Tuple[KnownSupplier, ...]:
    return tuple(
        KnownSupplier(
            canonical_name=n,
            location_keywords=derive_location_keywords(n),
            unique_tokens=derive_unique_tokens(n),
        )
        for n in names
    )


KNOWN_SUPPLIERS: Tuple[KnownSupplier, ...] = build_catalog()
