"""
HTML routes for the trade screens.

Form values are bound as plain strings into OrderForm so that a non-numeric
quantity or price is reported by the order validation rules instead of a
framework 422 page.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional, Union

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, field_validator

from src.application.dto.orders import BuyOrderRequest, SellOrderRequest
from src.domain.entities.market_data import StockTrade
from src.domain.exceptions import ValidationError
from src.infrastructure.entrypoints.app_context import AppContext, get_context

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter()


class OrderForm(BaseModel):
    stock_symbol: str = ""
    stock_name: str = ""
    quantity: str = ""
    price: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value

    def to_request(self, request_cls):
        return request_cls(
            stock_symbol=self.stock_symbol,
            stock_name=self.stock_name,
            quantity=_parse_int(self.quantity),
            price=_parse_float(self.price),
        )

    def as_fields(self) -> dict:
        return {
            "stockSymbol": self.stock_symbol,
            "stockName": self.stock_name,
            "quantity": self.quantity,
            "price": self.price,
        }


def order_form(
    stock_symbol: Annotated[str, Form(alias="stockSymbol")] = "",
    stock_name: Annotated[str, Form(alias="stockName")] = "",
    quantity: Annotated[str, Form()] = "",
    price: Annotated[str, Form()] = "",
) -> OrderForm:
    return OrderForm(
        stock_symbol=stock_symbol,
        stock_name=stock_name,
        quantity=quantity,
        price=price,
    )


@router.get("/", response_class=HTMLResponse)
@router.get("/Trade", response_class=HTMLResponse)
@router.get("/Trade/Index", response_class=HTMLResponse)
def index(request: Request, context: AppContext = Depends(get_context)):
    """Default trade screen with a live quote for the configured symbol."""
    settings = context.settings
    trade = context.stock_trade_use_case.execute(
        settings.default_stock_symbol, settings.default_order_quantity
    )
    return _render_trade(request, context, trade, _trade_fields(trade))


@router.post("/Trade/BuyOrder", response_class=HTMLResponse)
def buy_order(
    request: Request,
    form: OrderForm = Depends(order_form),
    context: AppContext = Depends(get_context),
):
    return _submit(request, context, form, BuyOrderRequest)


@router.post("/Trade/SellOrder", response_class=HTMLResponse)
def sell_order(
    request: Request,
    form: OrderForm = Depends(order_form),
    context: AppContext = Depends(get_context),
):
    return _submit(request, context, form, SellOrderRequest)


@router.get("/Trade/Orders", response_class=HTMLResponse)
def orders(request: Request, context: AppContext = Depends(get_context)):
    """List every buy and sell order placed since the process started."""
    return templates.TemplateResponse(
        request,
        "orders.html",
        {
            "buy_orders": context.order_service.list_buy_orders(),
            "sell_orders": context.order_service.list_sell_orders(),
            "trading_options": context.settings,
        },
    )


def _submit(
    request: Request,
    context: AppContext,
    form: OrderForm,
    request_cls: Union[type[BuyOrderRequest], type[SellOrderRequest]],
):
    order_request = form.to_request(request_cls)
    service = context.order_service
    try:
        if request_cls is BuyOrderRequest:
            service.create_buy_order(order_request)
        else:
            service.create_sell_order(order_request)
    except ValidationError as exc:
        trade = StockTrade(
            stock_symbol=form.stock_symbol,
            stock_name=form.stock_name or None,
            price=order_request.price,
            quantity=order_request.quantity or 0,
        )
        return _render_trade(
            request, context, trade, form.as_fields(), errors=exc.errors,
            status_code=422,
        )
    return RedirectResponse(url="/Trade/Orders", status_code=303)


def _render_trade(
    request: Request,
    context: AppContext,
    trade: StockTrade,
    fields: dict,
    errors: Optional[list[str]] = None,
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "trade": trade,
            "fields": fields,
            "errors": errors or [],
            "finnhub_token": context.settings.finnhub_token,
        },
        status_code=status_code,
    )


def _trade_fields(trade: StockTrade) -> dict:
    return {
        "stockSymbol": trade.stock_symbol,
        "stockName": trade.stock_name or "",
        "quantity": str(trade.quantity),
        "price": "" if trade.price is None else f"{trade.price:.2f}",
    }


def _parse_int(raw: str) -> Optional[int]:
    try:
        return int(raw)
    except ValueError:
        return None


def _parse_float(raw: str) -> Optional[float]:
    try:
        return float(raw)
    except ValueError:
        return None
