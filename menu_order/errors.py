"""Validation failures reported by the order lifecycle."""

from __future__ import annotations

from enum import Enum


class ValidationFailure(str, Enum):
    MISSING_NAME = "missing_name"
    MISSING_PHONE = "missing_phone"
    EMPTY_CART_ON_REVIEW = "empty_cart_on_review"
    INVALID_TRANSITION = "invalid_transition"

    @property
    def message(self) -> str:
        return _FAILURE_MESSAGES[self]


_FAILURE_MESSAGES: dict[ValidationFailure, str] = {
    ValidationFailure.MISSING_NAME: "Please enter your name.",
    ValidationFailure.MISSING_PHONE: "Please enter your phone number.",
    ValidationFailure.EMPTY_CART_ON_REVIEW: (
        "Your cart is empty! Please add some items before finalizing your order."
    ),
    ValidationFailure.INVALID_TRANSITION: "That action is not available right now.",
}


class OrderValidationError(Exception):
    """Raised inside the lifecycle when a request fails validation."""

    def __init__(self, failure: ValidationFailure) -> None:
        super().__init__(failure.message)
        self.failure = failure
