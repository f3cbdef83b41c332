"""Cart store: holds the current cart state and is its only writer.

The store is created once per storefront session and handed to whatever needs
to read or change the cart. ``dispatch`` runs the reducer, writes the result
through to the durable store, then notifies listeners.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog

from storefront.cart.actions import CartAction
from storefront.cart.reducer import UnknownActionPolicy, reduce_cart
from storefront.cart.state import CartState, initial_cart_state
from storefront.config import CART_STATE_KEY
from storefront.exceptions import StorageError
from storefront.storage.port import DurableStore

logger = structlog.get_logger(__name__)

CartListener = Callable[[CartState], None]


class CartStore:
    def __init__(
        self,
        storage: DurableStore,
        key: str = CART_STATE_KEY,
        default_state: CartState | None = None,
        unknown_policy: UnknownActionPolicy = UnknownActionPolicy.IGNORE,
    ) -> None:
        self._storage = storage
        self._key = key
        self._unknown_policy = unknown_policy
        self._listeners: list[CartListener] = []
        self._state = self._restore(default_state or initial_cart_state())

    @property
    def state(self) -> CartState:
        return self._state

    def dispatch(self, action: CartAction) -> CartState:
        """Apply ``action`` and return the resulting state."""
        previous = self._state
        self._state = reduce_cart(previous, action, self._unknown_policy)

        logger.debug(
            "Cart transition",
            action_type=action.type,
            item_count=self._state.total_item_count,
            total_amount=self._state.total_amount,
        )

        self._persist()
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        """Call ``listener`` with the new state after every dispatch.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _restore(self, default_state: CartState) -> CartState:
        try:
            snapshot = self._storage.read(self._key)
        except StorageError as exc:
            logger.warning("Could not read persisted cart", key=self._key, error=str(exc))
            return default_state

        if snapshot is None:
            return default_state

        try:
            state = CartState.from_dict(snapshot)
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Discarding invalid cart snapshot", key=self._key, error=str(exc))
            return default_state

        logger.info("Restored cart", key=self._key, item_count=state.total_item_count)
        return state

    def _persist(self) -> None:
        try:
            self._storage.write(self._key, self._state.to_dict())
        except StorageError as exc:
            logger.error("Failed to persist cart", key=self._key, error=str(exc))
