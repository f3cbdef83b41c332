"""FastAPI routes for the Storefront: menu, cart and checkout."""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from storefront.api.schemas import (
    CartActionRequest,
    CartStateResponse,
    CheckoutFormResponse,
    FieldValueRequest,
    MenuItemSchema,
    SubmissionResponse,
)
from storefront.cart.actions import CartAction
from storefront.checkout.orchestrator import SubmissionStatus
from storefront.session import StorefrontSession

_SUBMISSION_STATUS_CODES = {
    SubmissionStatus.PLACED: 201,
    SubmissionStatus.REJECTED: 422,
    SubmissionStatus.IN_PROGRESS: 409,
    SubmissionStatus.FAILED: 502,
}


def get_session(request: Request) -> StorefrontSession:
    """The storefront session wired into the application at startup."""
    return request.app.state.session


# ---------------------------------------------------------------------------
# Menu Router
# ---------------------------------------------------------------------------
menu_router = APIRouter(prefix="/menu", tags=["menu"])


@menu_router.get("", response_model=list[MenuItemSchema])
async def list_menu(session: StorefrontSession = Depends(get_session)):
    result = await session.catalog.load_menu()
    if not result.success:
        return JSONResponse(status_code=502, content={"error": result.error})
    return [MenuItemSchema(**item.to_payload()) for item in result.data]


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartStateResponse)
async def get_cart(session: StorefrontSession = Depends(get_session)) -> CartStateResponse:
    return CartStateResponse.from_state(session.cart.state)


@cart_router.post("/actions", response_model=CartStateResponse)
async def dispatch_cart_action(
    body: CartActionRequest,
    session: StorefrontSession = Depends(get_session),
) -> CartStateResponse:
    action = CartAction.from_dict(body.model_dump(by_alias=True))
    state = session.cart.dispatch(action)
    return CartStateResponse.from_state(state)


# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


def _require_field(session: StorefrontSession, field: str) -> None:
    if field not in session.form.fields:
        raise HTTPException(status_code=404, detail=f"Unknown checkout field: {field}")


@checkout_router.get("", response_model=CheckoutFormResponse)
async def get_checkout_form(session: StorefrontSession = Depends(get_session)) -> CheckoutFormResponse:
    return CheckoutFormResponse.from_form(session.form)


@checkout_router.put("/fields/{field}", response_model=CheckoutFormResponse)
async def update_field(
    field: str,
    body: FieldValueRequest,
    session: StorefrontSession = Depends(get_session),
) -> CheckoutFormResponse:
    _require_field(session, field)
    session.form.update_value(field, body.value)
    return CheckoutFormResponse.from_form(session.form)


@checkout_router.post("/fields/{field}/blur", response_model=CheckoutFormResponse)
async def blur_field(field: str, session: StorefrontSession = Depends(get_session)) -> CheckoutFormResponse:
    _require_field(session, field)
    session.form.mark_touched(field)
    return CheckoutFormResponse.from_form(session.form)


@checkout_router.post("/submit", response_model=SubmissionResponse)
async def submit_checkout(session: StorefrontSession = Depends(get_session)):
    outcome = await session.checkout.submit()
    body = SubmissionResponse(
        status=outcome.status.value,
        message=outcome.message,
        order_id=outcome.order_id,
        form=CheckoutFormResponse.from_form(session.form),
        cart=CartStateResponse.from_state(session.cart.state),
    )
    return JSONResponse(status_code=_SUBMISSION_STATUS_CODES[outcome.status], content=body.model_dump())
