"""Fetching the vedur.is observation feed"""
from typing import Optional
import httpx
from config import Config
from logging_config import get_logger
from weather.errors import UpstreamUnreachableError


logger = get_logger(__name__)


async def fetch_observation_xml(station: str, config: Config, client: Optional[httpx.AsyncClient] = None) -> str:
    """Fetch the raw observation XML for a station.

    One GET, no retry. The body is returned whatever the HTTP status is; the
    feed reports station errors inside the document itself.
    """
    url = config.observation_url(station)

    if client is None:
        async with httpx.AsyncClient(timeout=config.upstream_timeout) as own_client:
            return await _get_text(own_client, url, station)
    return await _get_text(client, url, station)


async def _get_text(client: httpx.AsyncClient, url: str, station: str) -> str:
    logger.debug("Fetching observation feed", station=station, url=url, event_type="upstream_request")

    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        raise UpstreamUnreachableError(f"Failed to fetch observations for {station}: {e}") from e

    if response.is_error:
        logger.warning(
            "Upstream returned error status",
            station=station,
            status_code=response.status_code,
            event_type="upstream_status"
        )

    return response.text
