"""figwind error types."""


class FigwindError(Exception):
    """Base class for figwind errors."""


class DictionaryError(FigwindError, ValueError):
    """Raised when a variable dictionary entry is rejected."""

    def __init__(self, message: str, name: str = "", value: str = ""):
        self.name = name
        self.value = value
        super().__init__(message)
