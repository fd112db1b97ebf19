"""Place-name geocoding against an OpenStreetMap Nominatim endpoint."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import Config
from .models import ResolvedLocation

LOGGER = logging.getLogger(__name__)


class GeocodeClient:
    """Resolve free text to the single best Nominatim candidate.

    Every failure mode (bad status, transport error, malformed body, empty
    result set) is reported as ``None`` so callers can fall through to their
    next strategy.
    """

    def __init__(self, config: Config) -> None:
        self.url = config.geocoder_url
        self.language = config.language
        self.timeout = config.request_timeout
        self.headers = {"User-Agent": config.user_agent}

    def lookup(self, query: Optional[str]) -> Optional[ResolvedLocation]:
        if not query:
            return None

        params = {
            "format": "json",
            "q": query,
            "limit": 1,
            "accept-language": self.language,
        }
        try:
            response = requests.get(self.url, params=params, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
            candidates = response.json()
        except requests.RequestException as exc:
            LOGGER.warning("Geocode request for %r failed: %s", query, exc)
            return None
        except ValueError as exc:
            LOGGER.warning("Geocode response for %r was not JSON: %s", query, exc)
            return None

        if not candidates or not isinstance(candidates, list):
            LOGGER.debug("No geocode result for %r", query)
            return None

        best = candidates[0]
        try:
            latitude = float(best["lat"])
            longitude = float(best["lon"])
        except (KeyError, TypeError, ValueError) as exc:
            LOGGER.warning("Geocode candidate for %r had no usable coordinates: %s", query, exc)
            return None

        LOGGER.debug("Geocoded %r to %.4f, %.4f", query, latitude, longitude)
        return ResolvedLocation(
            latitude=latitude,
            longitude=longitude,
            display_name=best.get("display_name"),
        )


__all__ = ["GeocodeClient"]
