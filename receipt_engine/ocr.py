# receipt_engine/ocr.py
# -------------------------------------------------------------
# Tesseract line source: image / PDF -> ordered OCR text lines.
# Recognition itself is Tesseract's job; this only sets it up and
# regroups its word boxes into lines in reading order.
# -------------------------------------------------------------

import logging
import os
import platform
import shutil
from collections import defaultdict
from typing import Any, Callable, Dict, Iterable, List, Optional

import pytesseract
from pdf2image import convert_from_path
from PIL import Image, ImageOps
from pytesseract import Output

from receipt_engine.config import Settings

logger = logging.getLogger(__name__)


# install locations tried after the explicit setting and PATH
_TESSERACT_LOCATIONS = {
    "Darwin": ("/opt/homebrew/bin/tesseract", "/usr/local/bin/tesseract", "/opt/local/bin/tesseract"),
    "Windows": (r"C:\Program Files\Tesseract-OCR\tesseract.exe", r"C:\Tesseract-OCR\tesseract.exe"),
}
_TESSERACT_DEFAULT = ("/usr/bin/tesseract", "/usr/local/bin/tesseract")
_POPPLER_LOCATIONS = (r"C:\poppler-25.07.0\Library\bin", r"C:\Users\Public\poppler\bin")


def _first_existing(candidates: Iterable[Optional[str]], exists: Callable[[str], bool]) -> Optional[str]:
    for c in candidates:
        if c and exists(c):
            return c
    return None


def setup_tesseract_path(explicit_cmd: Optional[str] = None) -> str:
    """
    Point pytesseract at a Tesseract binary and return its path.
    Order: explicit_cmd, TESSERACT_CMD, PATH, then the usual install
    locations for this OS.
    """
    cmd = (
        _first_existing((explicit_cmd, os.getenv("TESSERACT_CMD")), os.path.exists)
        or shutil.which("tesseract")
        or _first_existing(_TESSERACT_LOCATIONS.get(platform.system(), _TESSERACT_DEFAULT), os.path.exists)
    )
    if not cmd:
        raise RuntimeError("Tesseract not found. Install it and set PATH or TESSERACT_CMD.")
    pytesseract.pytesseract.tesseract_cmd = cmd
    return cmd


def detect_poppler(explicit_path: Optional[str] = None) -> Optional[str]:
    # pdf2image finds poppler on PATH everywhere except Windows
    if platform.system() != "Windows":
        return None
    return _first_existing((explicit_path, os.getenv("POPPLER_PATH")) + _POPPLER_LOCATIONS, os.path.isdir)


def load_pages(path: str, poppler_path: Optional[str] = None) -> List[Image.Image]:
    if not path.lower().endswith(".pdf"):
        with Image.open(path) as img:
            img.load()
            return [img.copy()]

    try:
        if poppler_path:
            return convert_from_path(path, dpi=300, poppler_path=poppler_path)
        return convert_from_path(path, dpi=300)
    except Exception as e:
        raise RuntimeError(
            f"Failed to render PDF with pdf2image: {e}\n"
            "Install Poppler and set POPPLER_PATH to its 'bin' folder on Windows."
        ) from e


def group_lines(data: Dict[str, List[Any]]) -> List[str]:
    """
    Rebuild text lines from ``image_to_data`` output. Words are grouped by
    (block, paragraph, line) in first-seen order and joined left to right.
    """
    lines = defaultdict(list)
    for i in range(len(data["text"])):
        txt = (data["text"][i] or "").strip()
        if not txt:
            continue
        key = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
        lines[key].append((txt, data["left"][i]))
    return [
        " ".join(w for w, _ in sorted(words, key=lambda z: z[1]))
        for words in lines.values()
    ]


def _preprocess(img: Image.Image) -> Image.Image:
    return ImageOps.autocontrast(img.convert("L"))


def read_lines(path: str, settings: Optional[Settings] = None) -> List[str]:
    """OCR every page of ``path`` and return its lines in reading order."""
    settings = settings or Settings.from_env()
    tess = setup_tesseract_path(settings.tesseract_cmd)
    logger.info("Using Tesseract: %s", tess)

    pages = load_pages(path, detect_poppler(settings.poppler_path))
    out: List[str] = []
    for n, page in enumerate(pages, start=1):
        data = pytesseract.image_to_data(
            _preprocess(page),
            lang=settings.ocr_lang,
            config="--psm 4 -c preserve_interword_spaces=1",
            output_type=Output.DICT,
            timeout=settings.ocr_timeout,
        )
        page_lines = group_lines(data)
        logger.debug("Page %d: %d lines", n, len(page_lines))
        out.extend(page_lines)
    return out
