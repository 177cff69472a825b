# receipt_engine/cli.py
import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from receipt_engine import configure_logging
from receipt_engine.config import Settings
from receipt_engine.engine import extract_document, extract_lines
from receipt_engine.extractors.supplier import SUPPLIER_STRATEGIES

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="receipt-engine",
        description="Extract record id, origin location and weight from a scanned transport receipt.",
    )
    p.add_argument("file", help="Receipt image/PDF, or a text file of OCR lines with --text.")
    p.add_argument(
        "--mode",
        choices=sorted(SUPPLIER_STRATEGIES),
        default=None,
        help="Supplier resolution strategy (default: RECEIPT_SUPPLIER_MODE or dictionary).",
    )
    p.add_argument(
        "--text",
        action="store_true",
        help="Treat FILE as UTF-8 text, one OCR line per line; skips Tesseract.",
    )
    p.add_argument("--out", default=None, help="Also write the JSON result to this path.")
    return p


def _read_text_lines(path: str) -> List[str]:
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def _save(data: dict, out_path: str) -> None:
    try:
        parent = os.path.dirname(out_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        logger.info("Wrote JSON: %s", out_path)
    except OSError as e:
        logger.warning("Failed to write JSON %s: %s", out_path, e)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
        configure_logging(settings.log_level)
        if args.text:
            data = extract_lines(_read_text_lines(args.file), args.mode, settings)
        else:
            data = extract_document(args.file, args.mode, settings)
    except (OSError, RuntimeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    if "error" in data:
        print(f"error: {data['error']}", file=sys.stderr)
        return 2

    print(json.dumps(data, indent=2, ensure_ascii=False))
    if args.out:
        _save(data, args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
