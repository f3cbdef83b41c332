"""Cart reducer: the pure transition function of the cart state machine.

``reduce_cart(state, action)`` never raises and never mutates ``state``.
Every branch that touches ``items`` adjusts the totals by exactly the amount
it added or removed, in decimal, so the totals always equal the sums over
the lines.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

import structlog

from storefront.cart.actions import CartAction, CartActionType
from storefront.cart.state import CartLine, CartState, add_money

logger = structlog.get_logger(__name__)


class UnknownActionPolicy(Enum):
    """What the reducer does with an action type it does not recognise."""

    IGNORE = "ignore"
    CLEAR_ITEMS = "clear_items"


def _requested_quantity(action: CartAction) -> int | None:
    """Units to add, or ``None`` when the payload asks for an unusable quantity."""
    if action.is_increment:
        return 1
    quantity = action.payload.get("quantity")
    if quantity is None:
        return 1
    # JSON clients may send whole numbers as 2.0
    if isinstance(quantity, float) and quantity.is_integer():
        quantity = int(quantity)
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        return None
    return quantity


def _with_items(
    state: CartState, items: tuple[CartLine, ...], unit_price: float, count_delta: int
) -> CartState:
    if not items:
        return replace(state, items=(), total_amount=0.0, total_item_count=0)
    # A placed order always leaves an empty cart behind
    return replace(
        state,
        items=items,
        total_amount=add_money(state.total_amount, unit_price, count_delta),
        total_item_count=state.total_item_count + count_delta,
        is_order_placed=False,
    )


def _add_item(state: CartState, action: CartAction) -> CartState:
    line_id = str(action.payload.get("id", ""))
    quantity = _requested_quantity(action)
    if quantity is None:
        logger.warning("Rejected cart item quantity", item_id=line_id, quantity=action.payload.get("quantity"))
        return state

    existing = state.find(line_id)

    if existing is not None:
        items = tuple(line.with_quantity(line.quantity + quantity) if line.id == line_id else line for line in state.items)
        return _with_items(state, items, existing.unit_price, quantity)

    try:
        line = CartLine(
            id=line_id,
            name=str(action.payload["name"]),
            unit_price=float(action.payload.get("unitPrice", action.payload.get("amount"))),
            quantity=quantity,
        )
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("Rejected cart item", item_id=line_id, error=str(exc))
        return state

    return _with_items(state, state.items + (line,), line.unit_price, quantity)


def _remove_item(state: CartState, action: CartAction) -> CartState:
    line_id = str(action.payload.get("id", ""))
    existing = state.find(line_id)
    if existing is None:
        logger.warning("Item not found in cart to remove", item_id=line_id)
        return state

    if existing.quantity > 1:
        items = tuple(line.with_quantity(line.quantity - 1) if line.id == line_id else line for line in state.items)
    else:
        items = tuple(line for line in state.items if line.id != line_id)

    return _with_items(state, items, existing.unit_price, -1)


def _open_cart(state: CartState, action: CartAction) -> CartState:
    return replace(state, is_cart_open=True)


def _close_cart(state: CartState, action: CartAction) -> CartState:
    return replace(state, is_cart_open=False, is_order_placed=False)


def _toggle_checkout(state: CartState, action: CartAction) -> CartState:
    return replace(state, is_checkout_open=not state.is_checkout_open, is_order_placed=False)


def _order_placed(state: CartState, action: CartAction) -> CartState:
    return CartState(
        items=(),
        total_amount=0.0,
        total_item_count=0,
        is_cart_open=True,
        is_checkout_open=False,
        is_order_placed=True,
    )


_HANDLERS = {
    CartActionType.ADD_ITEM.value: _add_item,
    CartActionType.REMOVE_ITEM.value: _remove_item,
    CartActionType.OPEN_CART.value: _open_cart,
    CartActionType.CLOSE_CART.value: _close_cart,
    CartActionType.TOGGLE_CHECKOUT.value: _toggle_checkout,
    CartActionType.ORDER_PLACED.value: _order_placed,
}


def reduce_cart(
    state: CartState,
    action: CartAction,
    unknown_policy: UnknownActionPolicy = UnknownActionPolicy.IGNORE,
) -> CartState:
    """Return the state that follows ``state`` once ``action`` is applied."""
    handler = _HANDLERS.get(action.type)
    if handler is not None:
        return handler(state, action)

    logger.warning("Unknown cart action", action_type=action.type, policy=unknown_policy.value)
    if unknown_policy is UnknownActionPolicy.CLEAR_ITEMS:
        return replace(state, items=(), total_amount=0.0, total_item_count=0)
    return state
