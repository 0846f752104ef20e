"""Command line entry point: print the documentation of a Rust file."""

import argparse
import logging
import sys
from pathlib import Path

from rustdoc_term.document_file import document_file
from rustdoc_term.errors import RustdocTermError
from rustdoc_term.load_config import load_config_from_env

logger = logging.getLogger(__name__)


def main() -> int:
    """Render the doc comments of a Rust source file to standard output."""
    ap = argparse.ArgumentParser(
        description=(
            "Print the doc comments of the functions and modules in a Rust source "
            "file, with highlighted code blocks."
        ),
    )
    ap.add_argument(
        "source",
        type=Path,
        help="Rust source file to document",
    )
    args = ap.parse_args()

    try:
        config = load_config_from_env()
    except RustdocTermError as exc:
        msg = f"error: {exc}"
        raise SystemExit(msg) from exc

    logging.basicConfig(
        level=config["logging"]["level"],
        format="%(levelname)s %(name)s: %(message)s",
    )

    logger.debug("Documenting %s", args.source)
    try:
        output = document_file(args.source, config)
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"error: cannot read {args.source}: {exc}"
        raise SystemExit(msg) from exc
    except RustdocTermError as exc:
        msg = f"error: {args.source}: {exc}"
        raise SystemExit(msg) from exc

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
