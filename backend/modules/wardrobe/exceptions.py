"""
Wardrobe module exceptions.
"""

from typing import Any, Optional

from shared.exceptions import ValidationError


class InvalidItemError(ValidationError):
    """Raised when item form fields are missing or malformed."""

    def __init__(self, field: str, message: str, value: Optional[Any] = None):
        super().__init__(
            f"Invalid {field}: {message}",
            code="INVALID_ITEM",
            details={"field": field, "value": value},
        )
        self.field = field
