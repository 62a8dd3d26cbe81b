"""Review form state, validated against the Reviews API input schema."""

from pydantic import ValidationError
from reviews.api.schemas import ReviewInput

REVIEW_FORM_DEFAULTS = {
    "title": "",
    "comment": "",
    "rating": 0,
}

# Error locations may be reported by alias ("isVerifiedPurchase")
_FIELD_NAMES = {(field.alias or name): name for name, field in ReviewInput.model_fields.items()}


class ReviewForm:
    def __init__(self) -> None:
        self.values: dict = {}
        self.errors: dict[str, str] = {}
        self.is_submitting = False
        self.reset()

    def reset(self) -> None:
        self.values = dict(REVIEW_FORM_DEFAULTS)
        self.errors = {}

    def set_value(self, name: str, value) -> None:
        self.values[name] = value
        self.errors.pop(name, None)

    def validate(self) -> ReviewInput | None:
        """Return the validated input, or None with field messages set."""
        try:
            review_input = ReviewInput.model_validate(self.values)
        except ValidationError as exc:
            self.errors = {}
            for error in exc.errors():
                location = str(error["loc"][0]) if error["loc"] else "form"
                self.errors.setdefault(_FIELD_NAMES.get(location, location), error["msg"])
            return None

        self.errors = {}
        return review_input
