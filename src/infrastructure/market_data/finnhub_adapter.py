"""
Infrastructure adapter: Finnhub REST API → IMarketDataProvider.

All Finnhub-specific details (endpoint paths, the token query parameter and
the short payload keys such as "c" and "pc") are confined here; the rest of
the codebase depends only on IMarketDataProvider.

Each lookup is a single best-effort round trip. Any failure is mapped to
MarketDataUnavailable, logged, and returned to the caller as None.
"""

import logging
from typing import Any, Optional

import httpx

from src.domain.entities.market_data import CompanyProfile, PriceQuote
from src.domain.exceptions import MarketDataUnavailable
from src.domain.ports.market_data_port import IMarketDataProvider

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://finnhub.io/api/v1"


class FinnhubMarketDataProvider(IMarketDataProvider):
    """Fetches company profiles and price quotes from finnhub.io."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        client: Optional[httpx.Client] = None,
    ) -> None:
        """
        Args:
            token:    Finnhub API token, sent as the ``token`` query parameter.
            base_url: API root, without a trailing slash.
            timeout:  Per-request timeout in seconds.
            client:   Optional pre-built httpx.Client (tests inject one).
        """
        self._token = token
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    def get_company_profile(self, symbol: str) -> Optional[CompanyProfile]:
        try:
            payload = self._get_json("/stock/profile2", symbol)
            return self._to_profile(symbol, payload)
        except MarketDataUnavailable as exc:
            logger.warning("Company profile unavailable for %s: %s", symbol, exc)
            return None

    def get_price_quote(self, symbol: str) -> Optional[PriceQuote]:
        try:
            payload = self._get_json("/quote", symbol)
            return self._to_quote(symbol, payload)
        except MarketDataUnavailable as exc:
            logger.warning("Price quote unavailable for %s: %s", symbol, exc)
            return None

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _get_json(self, path: str, symbol: str) -> dict[str, Any]:
        url = f"{self._base_url}{path}"
        try:
            response = self._client.get(
                url, params={"symbol": symbol, "token": self._token}
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise MarketDataUnavailable(
                f"HTTP {exc.response.status_code} from {path}"
            ) from exc
        except httpx.HTTPError as exc:
            raise MarketDataUnavailable(f"request to {path} failed: {exc}") from exc
        except ValueError as exc:
            raise MarketDataUnavailable(f"malformed JSON from {path}") from exc

        if not isinstance(payload, dict):
            raise MarketDataUnavailable(f"unexpected payload type from {path}")
        if payload.get("error"):
            raise MarketDataUnavailable(str(payload["error"]))
        return payload

    @staticmethod
    def _to_profile(symbol: str, payload: dict[str, Any]) -> CompanyProfile:
        # Finnhub answers unknown symbols with an empty object.
        name = payload.get("name")
        if not name:
            raise MarketDataUnavailable(f"no company profile for symbol: {symbol!r}")
        return CompanyProfile(
            ticker=str(payload.get("ticker") or symbol),
            name=str(name),
            exchange=payload.get("exchange"),
            currency=payload.get("currency"),
            country=payload.get("country"),
            industry=payload.get("finnhubIndustry"),
            logo=payload.get("logo"),
            web_url=payload.get("weburl"),
        )

    @staticmethod
    def _to_quote(symbol: str, payload: dict[str, Any]) -> PriceQuote:
        current_price = _as_float(payload.get("c"))
        # Unknown symbols come back with c == 0 rather than an error.
        if not current_price:
            raise MarketDataUnavailable(f"no price data for symbol: {symbol!r}")
        return PriceQuote(
            current_price=current_price,
            change=_as_float(payload.get("d")),
            percent_change=_as_float(payload.get("dp")),
            high=_as_float(payload.get("h")),
            low=_as_float(payload.get("l")),
            open=_as_float(payload.get("o")),
            previous_close=_as_float(payload.get("pc")),
        )


def _as_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
