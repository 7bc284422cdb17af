#!/usr/bin/env python3
"""
Analyze one URL, domain, or piece of text from the console.

Prints the plain-text security report (or the result as JSON) and can
record the analysis in history.

Usage:
  py -m backend_neroguard.tools.analyze_input "http://192.168.1.1/login?verify=1"
  py -m backend_neroguard.tools.analyze_input example.xyz --json --save
"""

from __future__ import annotations

import argparse
import json
import sys

from backend_neroguard.analysis_engine import analyze
from backend_neroguard.config import get_settings
from backend_neroguard.core.exceptions import InputValidationError, validate_input
from backend_neroguard.history import init_db, result_to_dict, save_to_history
from backend_neroguard.neroguard_logging import get_logger
from backend_neroguard.reporting import render_report

logger = get_logger(__name__)

EXIT_INVALID_INPUT = 2


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="NeroGuard: analyze a URL, domain, or text")
    ap.add_argument("input", help="URL, domain, or free text (quote it)")
    ap.add_argument("--json", action="store_true", help="Print result as JSON instead of the text report")
    ap.add_argument("--save", action="store_true", help="Record the analysis in history")
    args = ap.parse_args(argv)

    try:
        text = validate_input(args.input, get_settings().max_input_length)
    except InputValidationError as e:
        print(e.message, file=sys.stderr)
        return EXIT_INVALID_INPUT

    result = analyze(text)
    if args.save:
        init_db()
        entry_id = save_to_history(text, result)
        logger.info("analyze_input_saved", entry_id=entry_id)

    if args.json:
        print(json.dumps(result_to_dict(result), indent=2, ensure_ascii=False))
    else:
        print(render_report(result), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
