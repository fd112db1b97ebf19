"""Heuristic cascade mapping article text to a location."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from .geocode import GeocodeClient
from .models import ResolvedLocation

LOGGER = logging.getLogger(__name__)

# Checked in order; the first name found in the text is the only one tried.
COUNTRIES = (
    "Spain",
    "United Kingdom",
    "India",
    "Kenya",
    "Brazil",
    "Japan",
    "United States",
    "USA",
    "Mexico",
    "Canada",
    "Australia",
    "Nigeria",
    "France",
    "Germany",
    "Italy",
    "Chile",
    "Peru",
    "Colombia",
)

SUMMARY_QUERY_MAX_LENGTH = 300
SUMMARY_QUERY_CHARS = 200


def match_country(title: str, summary: str, countries: Sequence[str] = COUNTRIES) -> Optional[str]:
    """Return the first listed country mentioned in the title or summary."""

    title_lower = (title or "").lower()
    summary_lower = (summary or "").lower()
    for country in countries:
        needle = country.lower()
        if needle in title_lower or needle in summary_lower:
            return country
    return None


class LocationResolver:
    """Try cheap text heuristics before noisier free-text geocoding."""

    def __init__(self, geocoder: GeocodeClient, countries: Sequence[str] = COUNTRIES) -> None:
        self.geocoder = geocoder
        self.countries = tuple(countries)

    def resolve(self, title: str, summary: str) -> ResolvedLocation:
        country = match_country(title, summary, self.countries)
        if country:
            found = self.geocoder.lookup(country)
            if found:
                LOGGER.debug("Located %r via country name %s", title, country)
                return replace(found, country=country)

        found = self.geocoder.lookup(title)
        if found:
            LOGGER.debug("Located %r via title", title)
            return found

        if summary and len(summary) < SUMMARY_QUERY_MAX_LENGTH:
            found = self.geocoder.lookup(summary[:SUMMARY_QUERY_CHARS])
            if found:
                LOGGER.debug("Located %r via summary", title)
                return found

        LOGGER.debug("No location for %r", title)
        return ResolvedLocation.empty()


__all__ = ["COUNTRIES", "LocationResolver", "match_country"]
