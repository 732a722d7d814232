"""Order lifecycle state machine layered on the cart store."""

from __future__ import annotations

from typing import Callable

from menu_order.cart import CartStore
from menu_order.config import ORDER_NUMBER_START
from menu_order.debug_log import log_debug
from menu_order.errors import OrderValidationError, ValidationFailure
from menu_order.models import (
    FulfillmentMode,
    LifecycleSnapshot,
    LifecycleState,
    Order,
    OrderLine,
    TransitionResult,
)

LifecycleListener = Callable[[LifecycleSnapshot], None]


class OrderNumberSequence:
    """Hands out strictly increasing order numbers for one session."""

    def __init__(self, start: int = ORDER_NUMBER_START) -> None:
        self._next = start

    @property
    def peek(self) -> int:
        return self._next

    def allocate(self) -> int:
        number = self._next
        self._next += 1
        return number


def _require_text(value: object, failure: ValidationFailure) -> str:
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        raise OrderValidationError(failure)
    return text


class OrderLifecycle:
    """Governs when the cart may be reviewed, submitted and reset."""

    def __init__(self, cart: CartStore, numbers: OrderNumberSequence | None = None) -> None:
        self.cart = cart
        self.numbers = numbers or OrderNumberSequence()
        self.state = LifecycleState.BROWSING
        self.order: Order | None = None
        self.fulfillment = FulfillmentMode.PICKUP
        self._listeners: list[LifecycleListener] = []

    def subscribe(self, listener: LifecycleListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> LifecycleSnapshot:
        return LifecycleSnapshot(state=self.state, order=self.order, fulfillment=self.fulfillment)

    def review(self) -> TransitionResult:
        """Open the order summary for the current cart."""
        if self.state not in (LifecycleState.BROWSING, LifecycleState.REVIEWING):
            return self._fail(ValidationFailure.INVALID_TRANSITION, "review")
        if self.cart.is_empty:
            return self._fail(ValidationFailure.EMPTY_CART_ON_REVIEW, "review")
        if self.state == LifecycleState.REVIEWING:
            return self._ok()

        self._transition(LifecycleState.REVIEWING)
        return self._ok()

    def cancel_review(self) -> TransitionResult:
        if self.state == LifecycleState.REVIEWING:
            self._transition(LifecycleState.BROWSING)
        return self._ok()

    def select_fulfillment(self, mode: object) -> FulfillmentMode:
        self.fulfillment = FulfillmentMode.parse(mode)
        log_debug(f"lifecycle_fulfillment mode={self.fulfillment.value}")
        self._notify()
        return self.fulfillment

    def place_order(
        self,
        name: str,
        phone: str,
        email: str = "",
        fulfillment: object = None,
    ) -> TransitionResult:
        """
        Validate customer details and confirm the order.

        Validation runs in order: name, phone, then a final non-empty cart
        check. On failure the lifecycle stays in REVIEWING and no order
        number is consumed.
        """
        if self.state != LifecycleState.REVIEWING:
            return self._fail(ValidationFailure.INVALID_TRANSITION, "place_order")

        mode = self.fulfillment if fulfillment is None else FulfillmentMode.parse(fulfillment)

        self.state = LifecycleState.SUBMITTING
        try:
            customer_name = _require_text(name, ValidationFailure.MISSING_NAME)
            customer_phone = _require_text(phone, ValidationFailure.MISSING_PHONE)
            if self.cart.is_empty:
                raise OrderValidationError(ValidationFailure.EMPTY_CART_ON_REVIEW)
        except OrderValidationError as exc:
            self.state = LifecycleState.REVIEWING
            return self._fail(exc.failure, "place_order")

        self.fulfillment = mode
        self.order = Order(
            order_number=self.numbers.allocate(),
            customer_name=customer_name,
            customer_phone=customer_phone,
            customer_email=email.strip() if isinstance(email, str) else "",
            fulfillment=self.fulfillment,
            totals=self.cart.totals(),
            lines=tuple(OrderLine.from_cart_line(line) for line in self.cart.lines()),
        )
        log_debug(
            f"lifecycle_order_placed order_number={self.order.order_number} "
            f"total={self.order.totals.total} mode={self.order.fulfillment.value}"
        )
        self._transition(LifecycleState.CONFIRMED)
        return self._ok()

    def start_new_order(self) -> TransitionResult:
        """Discard the confirmed order and start over with an empty cart."""
        if self.state != LifecycleState.CONFIRMED:
            return self._fail(ValidationFailure.INVALID_TRANSITION, "start_new_order")

        self.order = None
        self.fulfillment = FulfillmentMode.PICKUP
        self.cart.clear()
        self._transition(LifecycleState.BROWSING)
        return self._ok()

    def _ok(self) -> TransitionResult:
        return TransitionResult(ok=True, state=self.state, order=self.order)

    def _fail(self, failure: ValidationFailure, action: str) -> TransitionResult:
        log_debug(f"lifecycle_{action}_rejected state={self.state.value} reason={failure.value}")
        return TransitionResult(ok=False, state=self.state, failure=failure)

    def _transition(self, state: LifecycleState) -> None:
        log_debug(f"lifecycle_transition from={self.state.value} to={state.value}")
        self.state = state
        self._notify()

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
