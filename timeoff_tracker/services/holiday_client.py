# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Public holiday client, outbound calls to the holiday API.
Fans out one request per configured country and joins on all of them.
"""

import asyncio
from typing import Any, Optional

import httpx

from timeoff_tracker.core.config import settings
from timeoff_tracker.core.logging import get_logger
from timeoff_tracker.metrics.prometheus import HOLIDAY_FETCHES

logger = get_logger(__name__)


class HolidayLookupError(RuntimeError):
    """At least one country's holiday list could not be fetched."""


class HolidayClient:
    """All-or-nothing holiday lookup across a fixed set of countries."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        countries: Optional[list[str]] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._base_url = (base_url or settings.HOLIDAY_API_URL).rstrip("/")
        self._countries = list(countries or settings.HOLIDAY_COUNTRIES)
        self._timeout = timeout if timeout is not None else settings.HOLIDAY_TIMEOUT
        self._transport = transport

    @property
    def countries(self) -> list[str]:
        return list(self._countries)

    async def get_holidays(self, year: str) -> list[dict[str, Any]]:
        """
        Return every configured country's holidays for ``year`` as one list,
        in country order. Raises HolidayLookupError if any country fails;
        partial results are discarded.
        """
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            results = await asyncio.gather(
                *(self._fetch_country(client, year, country) for country in self._countries),
                return_exceptions=True,
            )

        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            raise HolidayLookupError(
                f"{len(failures)} of {len(self._countries)} holiday lookups failed for {year}"
            ) from failures[0]

        holidays: list[dict[str, Any]] = []
        for country_holidays in results:
            if isinstance(country_holidays, list):
                holidays.extend(country_holidays)
            else:
                holidays.append(country_holidays)
        return holidays

    async def _fetch_country(
        self, client: httpx.AsyncClient, year: str, country: str
    ) -> Any:
        url = f"{self._base_url}/{year}/{country}"
        try:
            resp = await client.get(url)
            resp.raise_for_status()
            data = resp.json() if resp.content else []
        except (httpx.HTTPError, ValueError) as exc:
            HOLIDAY_FETCHES.labels(country=country, outcome="error").inc()
            logger.error("Holiday fetch failed: country=%s, year=%s, error=%s", country, year, exc)
            raise
        HOLIDAY_FETCHES.labels(country=country, outcome="success").inc()
        logger.info("Holidays fetched: country=%s, year=%s, status=%d", country, year, resp.status_code)
        return data
