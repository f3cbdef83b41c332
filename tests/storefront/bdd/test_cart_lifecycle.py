"""BDD tests for the cart lifecycle."""

import pytest
from pytest_bdd import parsers, scenarios, then, when
from storefront.cart.actions import add_item, close_cart, increment_item, open_cart, remove_item
from storefront.cart.store import CartStore

scenarios("features/cart_lifecycle.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('"{name}" with id "{item_id}" priced {price:f} is added to the cart'))
def add_dish(cart_store, name, item_id, price):
    cart_store.dispatch(add_item(item_id, name, price))


@when(parsers.cfparse('"{name}" with id "{item_id}" priced {price:f} is added to the cart {times:d} times'))
def add_dish_quantity(cart_store, name, item_id, price, times):
    cart_store.dispatch(add_item(item_id, name, price, quantity=times))


@when(parsers.cfparse('the cart line "{item_id}" is incremented'))
def increment_line(cart_store, item_id):
    cart_store.dispatch(increment_item(item_id))


@when(parsers.cfparse('the cart line "{item_id}" is removed once'))
def remove_line(cart_store, item_id):
    cart_store.dispatch(remove_item(item_id))


@when("the cart is opened")
def open_overlay(cart_store):
    cart_store.dispatch(open_cart())


@when("the cart is closed")
def close_overlay(cart_store):
    cart_store.dispatch(close_cart())


@when("the storefront restarts", target_fixture="cart_store")
def restart(memory_store):
    return CartStore(memory_store)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart has {count:d} line"))
def cart_has_one_line(cart_store, count):
    assert len(cart_store.state.items) == count


@then(parsers.cfparse("the cart has {count:d} lines"))
def cart_has_lines(cart_store, count):
    assert len(cart_store.state.items) == count


@then(parsers.cfparse('line "{item_id}" has quantity {quantity:d}'))
def line_quantity(cart_store, item_id, quantity):
    assert cart_store.state.find(item_id).quantity == quantity


@then(parsers.cfparse("the cart total is {total:f}"))
def cart_total(cart_store, total):
    assert cart_store.state.total_amount == pytest.approx(total)
    assert cart_store.state.totals_consistent()


@then("the cart is open")
def cart_is_open(cart_store):
    assert cart_store.state.is_cart_open


@then("the cart is closed")
def cart_is_closed(cart_store):
    assert not cart_store.state.is_cart_open
