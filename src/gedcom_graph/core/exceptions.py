class GedcomGraphError(Exception):
    """Base exception for GEDCOM graph failures."""


class GedcomReadError(GedcomGraphError):
    """Raised when the source file cannot be read."""

    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to read GEDCOM file {self.path}: {reason}")


class DateContextError(ValueError):
    """Raised when a fictional date context is malformed."""
