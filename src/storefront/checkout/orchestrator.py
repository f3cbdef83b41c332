"""Checkout orchestration: turns a filled-in checkout form into a placed order.

Submission is gated on the form: every field filled in and no field in
error. A valid submission sends an order record built from the form values
and a snapshot of the cart to the orders path. Only a successful create
places the order in the cart and clears the form; after a failure both are
left untouched so the customer can retry without retyping anything.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

import structlog
from protean.exceptions import ValidationError

from storefront.cart.actions import order_placed
from storefront.cart.store import CartStore
from storefront.checkout.form import CheckoutForm
from storefront.checkout.order import OrderRecord
from storefront.config import ORDERS_PATH
from storefront.remote.service import RemoteService

logger = structlog.get_logger(__name__)

INCOMPLETE_FORM = "Please fix the errors and complete all fields before submitting."
EMPTY_CART = "Your cart is empty."
ORDER_FAILED = "Failed to place order. Please try again."
ORDER_IN_PROGRESS = "Your order is already being placed."
ORDER_PLACED = "Order placed successfully!"


class SubmissionStatus(Enum):
    PLACED = "placed"
    REJECTED = "rejected"
    FAILED = "failed"
    IN_PROGRESS = "in_progress"


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result of a checkout submission attempt."""

    status: SubmissionStatus
    message: str
    order_id: str | None = None

    @property
    def placed(self) -> bool:
        return self.status is SubmissionStatus.PLACED


class CheckoutOrchestrator:
    def __init__(
        self,
        cart: CartStore,
        form: CheckoutForm,
        remote: RemoteService,
        orders_path: str = ORDERS_PATH,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.cart = cart
        self.form = form
        self.remote = remote
        self.orders_path = orders_path
        self._clock = clock or (lambda: datetime.now(UTC))
        self._submitting = False

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    async def submit(self) -> SubmissionOutcome:
        """Place the order described by the form and the current cart."""
        if self._submitting:
            logger.info("Ignoring checkout submission while another is pending")
            return SubmissionOutcome(SubmissionStatus.IN_PROGRESS, ORDER_IN_PROGRESS)

        if self.cart.state.is_empty:
            return SubmissionOutcome(SubmissionStatus.REJECTED, EMPTY_CART)

        if not self.form.is_submittable:
            # Reveal every problem, including fields never visited
            self.form.touch_all()
            logger.info("Rejected incomplete checkout", errors=[f for f, e in self.form.errors.items() if e])
            return SubmissionOutcome(SubmissionStatus.REJECTED, INCOMPLETE_FORM)

        try:
            record = OrderRecord.from_checkout(self.form.values, self.cart.state, self._clock())
        except (ValidationError, ValueError) as exc:
            logger.warning("Could not build order record", error=str(exc))
            return SubmissionOutcome(SubmissionStatus.REJECTED, INCOMPLETE_FORM)

        self._submitting = True
        try:
            result = await self.remote.create(self.orders_path, record.to_payload())
        finally:
            self._submitting = False

        if not result.success:
            logger.warning("Order submission failed", error=result.error)
            return SubmissionOutcome(SubmissionStatus.FAILED, ORDER_FAILED)

        order_id = result.data["id"]
        self.cart.dispatch(order_placed())
        self.form.reset()
        logger.info(
            "Order placed",
            order_id=order_id,
            total_amount=record.total_amount,
            item_count=record.total_item_count,
        )
        return SubmissionOutcome(SubmissionStatus.PLACED, ORDER_PLACED, order_id=order_id)
