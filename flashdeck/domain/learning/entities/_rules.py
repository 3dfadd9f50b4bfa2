"""Field rules shared by the learning entities."""

from flashdeck.domain.common.exceptions import ValidationError


def ensure_not_blank(value: object, field: str, label: str) -> None:
    """Raise ValidationError if value is not a string with visible characters."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} cannot be empty", field=field)
