"""Shared BDD fixtures and step definitions for the storefront."""

import asyncio

import pytest
from pytest_bdd import given, parsers, then, when
from storefront.cart.actions import add_item


@pytest.fixture()
def outcome():
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty cart")
def empty_cart(cart_store):
    assert cart_store.state.is_empty


@given(parsers.cfparse('a cart containing "{name}" with id "{item_id}" priced {price:f}'))
def cart_containing(cart_store, name, item_id, price):
    cart_store.dispatch(add_item(item_id, name, price))


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the order is submitted")
def submit_order(orchestrator, outcome):
    outcome["result"] = asyncio.run(orchestrator.submit())


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart holds {count:d} items"))
def cart_holds_items(cart_store, count):
    assert cart_store.state.total_item_count == count
