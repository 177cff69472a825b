# receipt_engine/models.py
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class TextLine:
    """One recognized OCR line; ``index`` is its position in reading order."""
    index: int
    text: str


LineSequence = Tuple[TextLine, ...]


def to_line_sequence(lines: Iterable[str]) -> LineSequence:
    """
    Wrap raw OCR strings as an immutable LineSequence.
    Raises TypeError for a missing sequence or a non-string line.
    """
    if lines is None:
        raise TypeError("line sequence is required, got None")
    if isinstance(lines, (str, bytes)):
        raise TypeError("line sequence must be a sequence of strings, not a single string")

    seq = []
    for i, text in enumerate(lines):
        if not isinstance(text, str):
            raise TypeError(f"line {i} is {type(text).__name__}, expected str")
        seq.append(TextLine(i, text))
    return tuple(seq)


@dataclass(frozen=True)
class KnownSupplier:
    canonical_name: str
    location_keywords: frozenset = field(default_factory=frozenset)
    unique_tokens: frozenset = field(default_factory=frozenset)

    @property
    def keywords(self) -> frozenset:
        return self.location_keywords | self.unique_tokens


@dataclass(frozen=True)
class ExtractionResult:
    all_text: Tuple[str, ...] = ()
    record_id: Optional[str] = None
    supplier_name: Optional[str] = None
    weight: Optional[str] = None
