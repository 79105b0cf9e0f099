"""
Exceptions raised, and diagnostics recorded, while reading FAST input decks
"""


class FastDeckError(Exception):
    """Base class for fastdeck errors"""


class StreamOpenFailure(FastDeckError):
    """Raised when an input deck cannot be opened or read"""

    def __init__(self, resource: str, reason: str = ""):
        message = (
            f"FAST input file {resource} could not be opened for reading. "
            "Check if the file exists or is locked."
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.resource = resource


class UnresolvedReference(FastDeckError, LookupError):
    """Raised when a table size parameter is missing or not numeric"""

    def __init__(self, name: str, value: str = None):
        if value is None:
            message = f"Parameter '{name}' was not found before the table that needs it"
        else:
            message = f"Parameter '{name}' has non-numeric value {value!r}"
        super().__init__(message)
        self.name = name
        self.value = value


class EmptyOutputList(UserWarning):
    """Diagnostic stored in FastDocument.warnings when an OutList section is empty

    It is recorded, never raised or passed to warnings.warn, so warning filters
    cannot turn it into an error.
    """

    def __eq__(self, other):
        return type(other) is type(self) and other.args == self.args

    def __hash__(self):
        return hash((type(self), self.args))
