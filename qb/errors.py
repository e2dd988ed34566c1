"""
Exceptions used while reading the source documents.

Loaders catch these themselves and fall back to empty structures, so
nothing here ever reaches a caller of the query API.
"""


class QuickBibleError(Exception):
    """Base exception for QuickBible."""
    pass


class CorpusFormatError(QuickBibleError):
    """Raised when a source document does not have the expected shape."""

    def __init__(self, source: str, reason: str = ""):
        message = f"Unexpected document structure in {source}"
        if reason:
            message += f": {reason}"
        message += "\nFix: Provide a <bible><book><h/><c><v/></c></book></bible> document"
        super().__init__(message)
        self.source = source
        self.reason = reason
