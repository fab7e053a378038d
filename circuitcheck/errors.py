"""Custom exceptions for schematic ingestion and topology analysis."""


class InvalidSchematic(ValueError):
    """Raised when a schematic cannot be analyzed (malformed input)."""

    def __init__(self, message: str, errors: str | None = None):
        self.errors = errors
        super().__init__(message if errors is None else f"{message}: {errors}")


class SearchBudgetExceeded(RuntimeError):
    """Raised when the loop search examines more states than allowed."""

    def __init__(self, max_steps: int):
        self.max_steps = max_steps
        super().__init__(f"Loop search exceeded its budget of {max_steps} steps")
