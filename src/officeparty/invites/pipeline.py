"""
Invite pipeline: who lives close enough to the office to be invited?

Flow for one run:
1) resolve the office location and parse the radius (fail before reading input),
2) decode the whole customer list,
3) keep customers strictly closer than the radius,
4) sort them by `user_id` and write them back in the input wire format.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, TextIO

from officeparty.catalog.offices import office_coordinates
from officeparty.config.settings import Settings
from officeparty.core.geo import GeoPoint, great_circle_m
from officeparty.core.units import parse_distance
from officeparty.customers.io import filter_customers, read_customers, sort_by_id, write_customers
from officeparty.domain.models import Customer

logger = logging.getLogger(__name__)

DistanceFn = Callable[[float, float, float, float], float]


def within_radius(distance_fn: DistanceFn, reference: GeoPoint, radius_m: int) -> Callable[[Customer], bool]:
    """Predicate: is the customer strictly closer than `radius_m` to `reference`?"""

    def _inside(customer: Customer) -> bool:
        return distance_fn(customer.latitude, customer.longitude, reference.lat, reference.lon) < radius_m

    return _inside


def filter_sort(
    customers: Iterable[Customer],
    reference: GeoPoint,
    radius_m: int,
    distance_fn: DistanceFn = great_circle_m,
) -> list[Customer]:
    invited = filter_customers(customers, within_radius(distance_fn, reference, radius_m))
    return sort_by_id(invited)


def customers_in_office_radius(
    reader: TextIO,
    writer: TextIO,
    office: str,
    distance: str,
    distance_fn: DistanceFn = great_circle_m,
    *,
    settings: Settings | None = None,
) -> int:
    """Run the whole invite pass from `reader` to `writer`; returns the number invited.

    Errors (`InvalidOffice`, `InvalidDistance`, `ParseFailure`, `WriteFailure`)
    propagate unchanged.
    """
    reference = office_coordinates(office, settings)
    radius_m = parse_distance(distance)
    logger.debug("Office %s at (%s, %s), radius %s m", office, reference.lat, reference.lon, radius_m)

    customers = read_customers(reader)
    invited = filter_sort(customers, reference, radius_m, distance_fn)
    logger.info("Inviting %s of %s customers within %s m of %s", len(invited), len(customers), radius_m, office)

    write_customers(writer, invited)
    return len(invited)
