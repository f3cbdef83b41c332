"""Storefront settings loaded from the environment.

Every value has a development default so the storefront runs without any
configuration: an in-memory cart store and the fake remote database.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

CART_STATE_KEY = "cartState"
MENU_PATH = "/menu"
ORDERS_PATH = "/orders"

_TRUTHY = {"1", "true", "yes", "on"}


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_float(*keys: str, default: float) -> float:
    v = _get_env(*keys)
    if v is None:
        return default
    return float(v)


def _get_bool(*keys: str, default: bool = False) -> bool:
    v = _get_env(*keys)
    if v is None:
        return default
    return v.lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    env: str = "development"
    origin: str = "default"
    cart_key: str = CART_STATE_KEY
    state_dir: str | None = None
    database_url: str | None = None
    database_auth: str | None = None
    http_timeout: float = 10.0
    menu_path: str = MENU_PATH
    orders_path: str = ORDERS_PATH
    seed_demo_item: bool = False
    unknown_action: str = "ignore"


def load_settings() -> Settings:
    """Read settings from ``STOREFRONT_*`` environment variables."""
    unknown_action = _get_env("STOREFRONT_UNKNOWN_ACTION", default="ignore")
    if unknown_action not in ("ignore", "clear_items"):
        raise RuntimeError(f"STOREFRONT_UNKNOWN_ACTION must be 'ignore' or 'clear_items', got {unknown_action!r}")

    return Settings(
        env=(_get_env("STOREFRONT_ENV", "PROTEAN_ENV", default="development") or "development").lower(),
        origin=_get_env("STOREFRONT_ORIGIN", default="default") or "default",
        cart_key=_get_env("STOREFRONT_CART_KEY", default=CART_STATE_KEY) or CART_STATE_KEY,
        state_dir=_get_env("STOREFRONT_STATE_DIR"),
        database_url=_get_env("STOREFRONT_DATABASE_URL", "FIREBASE_DATABASE_URL"),
        database_auth=_get_env("STOREFRONT_DATABASE_AUTH", "FIREBASE_DATABASE_AUTH"),
        http_timeout=_get_float("STOREFRONT_HTTP_TIMEOUT", default=10.0),
        menu_path=_get_env("STOREFRONT_MENU_PATH", default=MENU_PATH) or MENU_PATH,
        orders_path=_get_env("STOREFRONT_ORDERS_PATH", default=ORDERS_PATH) or ORDERS_PATH,
        seed_demo_item=_get_bool("STOREFRONT_SEED_DEMO_ITEM"),
        unknown_action=unknown_action,
    )
