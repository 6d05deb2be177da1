"""Exception hierarchy for Deal Room."""

from dealroom.models.insurance import FieldError


class DealRoomError(Exception):
    """Base exception for all Deal Room errors."""


class EstimateValidationError(DealRoomError, ValueError):
    """Raised when insurance estimate input fails validation.

    ``field`` and ``message`` describe the first offending field; ``errors``
    holds every field-level failure reported for the input.
    """

    def __init__(self, errors: list[FieldError]):
        if not errors:
            errors = [FieldError(field="input", message="invalid input")]
        self.errors = tuple(errors)
        self.field = errors[0].field
        self.message = errors[0].message
        super().__init__(f"{self.field}: {self.message}")

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "message": self.message,
            "errors": [{"field": e.field, "message": e.message} for e in self.errors],
        }
