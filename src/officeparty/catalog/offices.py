"""
Office directory.

Offices rarely change, so their locations live in the settings YAML instead of an
external inventory system. Lookups normalize the name by capitalizing each word,
so `dublin` and `DUBLIN` both find `Dublin`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from officeparty.config.settings import OfficeLocation, Settings, get_settings
from officeparty.core.errors import InvalidOffice
from officeparty.core.geo import GeoPoint


def normalize_office_name(name: str) -> str:
    return " ".join(word.capitalize() for word in name.split())


def office_table(settings: Settings | None = None) -> Mapping[str, OfficeLocation]:
    """Read-only view of the configured offices."""
    if settings is None:
        settings = get_settings()
    return MappingProxyType(settings.offices)


def office_coordinates(name: str, settings: Settings | None = None) -> GeoPoint:
    """Return the location of office `name`, or raise `InvalidOffice`."""
    location = office_table(settings).get(normalize_office_name(name))
    if location is None:
        raise InvalidOffice(name)
    return GeoPoint(lat=location.lat, lon=location.lon)


def list_offices(settings: Settings | None = None) -> list[str]:
    return sorted(office_table(settings))
