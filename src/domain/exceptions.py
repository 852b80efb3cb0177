"""
Domain exceptions.
Zero external dependencies.
"""


class ValidationError(ValueError):
    """An order request broke one or more field rules.

    errors holds one human-readable message per violated rule, in rule order.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class MarketDataUnavailable(Exception):
    """The quote provider could not return usable data for a symbol."""
