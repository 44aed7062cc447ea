"""Error types raised by the code writer."""


class CodeWriterError(Exception):
    """Base error for encoding, layout and rendering failures."""


class InvalidArgumentError(CodeWriterError, ValueError):
    """Caller supplied contents, dimensions or hints that cannot be used."""


class InvalidStateError(CodeWriterError, RuntimeError):
    """A collaborator produced nothing usable, or was used out of order."""
