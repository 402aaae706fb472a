"""
Main entry for famtext.

This module is intentionally thin:
- argument parsing
- configuration setup
- pipeline orchestration

No import logic lives here.
"""

from __future__ import annotations

import argparse
import sys

from famtext.config import get_config
from famtext.core.context import ImportContext
from famtext.core.exceptions import TreeImportError
from famtext.core.pipeline import Pipeline
from famtext.logging import get_logger, set_debug

log = get_logger("main")


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Import a free-text family description into tree JSON"
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Path to the text file",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="outputs/tree.json",
        help="Tree JSON output path (.json is appended when missing)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


# ---------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------
def run(input_path: str, output_path: str, debug_flag: bool) -> ImportContext:
    cfg = get_config()
    debug = bool(debug_flag) or bool(cfg.debug)
    if debug_flag:
        set_debug(True)

    log.info(f"Importing text: {input_path}")

    ctx = ImportContext(
        config=cfg,
        logger=log,
        input_path=input_path,
        output_path=output_path,
        debug=debug,
    )

    out_path = Pipeline(ctx).run()

    log.info(f"Import complete. people={ctx.stats.get('people')} output={out_path}")
    return ctx


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv=None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    try:
        run(
            input_path=args.input,
            output_path=args.output,
            debug_flag=args.debug,
        )
    except TreeImportError as exc:
        log.error(f"Import failed: {exc.message}")
        return 1
    except Exception as exc:
        log.exception(f"Unhandled exception in main: {exc}")
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
