"""Print the documentation of a Rust source file to the terminal.

Usage:
    python main.py path/to/file.rs
"""

from rustdoc_term.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
