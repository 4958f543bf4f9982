"""
bmkg forecast api client
"""

import logging
from typing import Any, Optional

import requests

from config import BMKG_ADM4, BMKG_API_URL, REQUEST_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)


class ForecastLoadError(RuntimeError):
    """the forecast could not be loaded from the api"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


def fetch_forecast(
    adm4: Optional[str] = None,
    *,
    url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Any:
    """
    fetch the raw forecast document for one adm4 code, single attempt

    args:
        adm4: village-level administrative code, defaults to BMKG_ADM4
        url: endpoint override, defaults to BMKG_API_URL
        timeout: request timeout in seconds, defaults to REQUEST_TIMEOUT

    returns:
        decoded json document, or None if the body is not json

    raises:
        ForecastLoadError: on network failure or a non-2xx response
    """
    url = url or BMKG_API_URL
    params = {"adm4": adm4 or BMKG_ADM4}

    try:
        response = requests.get(
            url,
            params=params,
            headers={"User-Agent": USER_AGENT},
            timeout=REQUEST_TIMEOUT if timeout is None else timeout,
        )
    except requests.RequestException as e:
        raise ForecastLoadError(f"forecast request failed: {e}") from e

    if not 200 <= response.status_code < 300:
        raise ForecastLoadError(
            f"forecast request failed: {response.status_code} {response.reason} for url: {response.url}",
            status=response.status_code,
        )

    try:
        return response.json()
    except ValueError as e:
        logger.warning("forecast response from %s is not json: %s", response.url, e)
        return None


if __name__ == "__main__":
    import sys
    from datetime import datetime, timezone

    from config import LOG_LEVEL
    from services.forecast import ForecastService

    logging.basicConfig(level=LOG_LEVEL)
    adm4 = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        series = ForecastService.load_forecast(adm4)
    except ForecastLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)
    print(series.to_context(datetime.now(timezone.utc)))
