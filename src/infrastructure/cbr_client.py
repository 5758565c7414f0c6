"""HTTP client for the Central Bank of Russia daily rates feed."""

from datetime import date, timedelta
from decimal import Decimal, InvalidOperation
from logging import Logger
import xml.etree.ElementTree as ET

import requests

from src.application.ports.rate_source import CurrencyRateSourcePort
from src.domain.errors import RateSourceError
from src.domain.models import DailyRates
from src.infrastructure.logging.logger import get_app_logger


CBR_DAILY_URL = "https://cbr.ru/scripts/XML_daily.asp"
CBR_QUOTE_CURRENCY = "RUB"
MAX_FORWARD_ATTEMPTS = 7


def format_cbr_date(day: date) -> str:
    """Format a date the way the feed expects (``dd/mm/yyyy``)."""
    return day.strftime("%d/%m/%Y")


def parse_cbr_xml(payload: str | bytes) -> dict[str, Decimal]:
    """Parse a ``ValCurs`` document into per-unit RUB rates.

    Args:
        payload: Raw XML body returned by the feed.

    Returns:
        dict[str, Decimal]: Rate of one unit of each currency in RUB, keyed
        by char code. Values are divided by their nominal.

    Raises:
        RateSourceError: If the document cannot be parsed.
    """
    try:
        root = ET.fromstring(payload)
    except ET.ParseError as exc:
        raise RateSourceError(f"Malformed rate document: {exc}") from exc

    rates: dict[str, Decimal] = {}
    for valute in root.iter("Valute"):
        code = (valute.findtext("CharCode") or "").strip().upper()
        raw_value = (valute.findtext("Value") or "").strip()
        raw_nominal = (valute.findtext("Nominal") or "1").strip()
        if not code or not raw_value:
            continue
        try:
            value = Decimal(raw_value.replace(",", "."))
            nominal = Decimal(raw_nominal or "1")
        except InvalidOperation as exc:
            raise RateSourceError(
                f"Invalid rate value for {code}: {raw_value}"
            ) from exc
        if nominal <= 0 or value <= 0:
            continue
        rates[code] = value / nominal
    return rates


class CbrRateSource(CurrencyRateSourcePort):
    """Fetch daily rates from the CBR XML endpoint.

    The feed publishes the rate effective for a day under the following
    date, so requests start at ``day + 1`` and move forward on HTTP errors.
    """

    def __init__(
        self,
        base_url: str = CBR_DAILY_URL,
        timeout: float = 30.0,
        logger: Logger | None = None,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Endpoint serving the daily XML document.
            timeout: Request timeout in seconds.
            logger: Optional logger compatible with logging.Logger-like API.
            session: Optional requests session, mainly for connection reuse.
        """
        self._base_url = base_url
        self._timeout = timeout
        self._logger = logger or get_app_logger()
        self._http = session or requests

    def fetch_daily_rates(self, day: date) -> DailyRates:
        request_date = day + timedelta(days=1)
        for _ in range(MAX_FORWARD_ATTEMPTS):
            params = {"date_req": format_cbr_date(request_date)}
            try:
                response = self._http.get(
                    self._base_url,
                    params=params,
                    timeout=self._timeout,
                )
            except requests.RequestException as exc:
                raise RateSourceError(
                    f"Rate request failed for {day.isoformat()}: {exc}"
                ) from exc
            if response.ok:
                rates = parse_cbr_xml(response.content)
                if not rates:
                    raise RateSourceError(
                        f"Rate document for {day.isoformat()} is empty"
                    )
                return DailyRates(
                    date=day,
                    quote_currency=CBR_QUOTE_CURRENCY,
                    rates=rates,
                )
            self._logger.warning(
                f"Rate feed returned HTTP {response.status_code} "
                f"for {params['date_req']}"
            )
            request_date += timedelta(days=1)
        raise RateSourceError(
            f"No rates published for {day.isoformat()}"
        )


__all__ = [
    "CBR_DAILY_URL",
    "CbrRateSource",
    "format_cbr_date",
    "parse_cbr_xml",
]
