"""
Field rules for order requests.

Business decisions owned here:
  - quantity range [MIN_QUANTITY, MAX_QUANTITY].
  - price range (0, MAX_PRICE].
  - earliest accepted order timestamp.

validate_order_request() is called explicitly by OrderService; nothing here
relies on framework reflection.
"""

import math
from datetime import datetime

from src.application.dto.orders import OrderRequest

MIN_QUANTITY: int = 1
MAX_QUANTITY: int = 100000
MAX_PRICE: float = 100000
EARLIEST_ORDER_DATE = datetime(2000, 1, 1)


def validate_order_request(request: OrderRequest) -> list[str]:
    """Return one message per violated rule; an empty list means valid."""
    errors: list[str] = []

    if not request.stock_symbol or not request.stock_symbol.strip():
        errors.append("Stock Symbol can't be empty")

    if not request.stock_name or not request.stock_name.strip():
        errors.append("Stock Name can't be empty")

    quantity = request.quantity
    if quantity is None or isinstance(quantity, bool) or not isinstance(quantity, int):
        errors.append("Quantity must be a whole number")
    elif not MIN_QUANTITY <= quantity <= MAX_QUANTITY:
        errors.append(
            f"Quantity must be between {MIN_QUANTITY} and {MAX_QUANTITY}"
        )

    price = request.price
    if (
        price is None
        or isinstance(price, bool)
        or not isinstance(price, (int, float))
        or not math.isfinite(price)
    ):
        errors.append("Price must be a number")
    elif not 0 < price <= MAX_PRICE:
        errors.append(f"Price must be greater than 0 and at most {MAX_PRICE:g}")

    order_date = request.date_and_time_of_order
    if order_date is None:
        errors.append("Date and time of order is required")
    elif order_date.replace(tzinfo=None) < EARLIEST_ORDER_DATE:
        errors.append("Date and time of order should not be older than Jan 01, 2000")

    return errors
