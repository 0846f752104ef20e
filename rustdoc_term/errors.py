"""Exceptions raised while documenting a source file."""


class RustdocTermError(Exception):
    """Base class for failures that abort a documentation run."""


class ConfigError(RustdocTermError):
    """Raised when the configuration holds a value the renderer cannot use."""


class SourceParseError(RustdocTermError):
    """Raised when the input is not syntactically valid Rust."""

    def __init__(self, message: str, line: int, column: int) -> None:
        """Store the 1-based position of the first syntax problem."""
        super().__init__(f"{message} at line {line}, column {column}")
        self.line = line
        self.column = column


class UnsupportedMarkdownError(RustdocTermError):
    """Raised when a doc comment uses a Markdown construct we do not render."""

    def __init__(self, construct: str) -> None:
        """Record which construct was found."""
        super().__init__(f"unsupported Markdown construct: {construct}")
        self.construct = construct
