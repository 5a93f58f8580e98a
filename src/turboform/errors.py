"""Error types and the document error sink.

Recoverable problems are reported as ``DOMError`` records on the owning
document (see ``Document.report_error``) rather than raised. Programming errors
raise ``DOMException`` subclasses.
"""


class DOMError:
    """A reported, non-fatal problem with an error code and optional message."""

    __slots__ = ("code", "message")

    def __init__(self, code, message=None):
        self.code = code
        self.message = message or code

    def __repr__(self):
        if self.message != self.code:
            return f"DOMError({self.code!r}, message={self.message!r})"
        return f"DOMError({self.code!r})"

    def __str__(self):
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code

    def __eq__(self, other):
        if not isinstance(other, DOMError):
            return NotImplemented
        return self.code == other.code and self.message == other.message

    __hash__ = None  # Unhashable since we define __eq__


class StrictModeError(Exception):
    """Raised by a strict document on the first reported error."""

    def __init__(self, error):
        self.error = error
        super().__init__(str(error))


class DOMException(Exception):
    name = "Error"

    def __init__(self, message=""):
        self.message = message
        super().__init__(message)


class InvalidStateError(DOMException):
    name = "InvalidStateError"


class NotSupportedError(DOMException):
    name = "NotSupportedError"


def not_implemented(feature, document):
    """Report that ``feature`` is not implemented by this library."""
    if document is None:
        return
    document.report_error(DOMError("not-implemented", message=f"Not implemented: {feature}"))
