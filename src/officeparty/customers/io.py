"""
Line-oriented reading and writing of customer lists.

The whole input is buffered before anything is filtered: the run is all-or-nothing,
so one malformed line fails the batch instead of being skipped.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, TextIO

from officeparty.core.errors import ParseFailure, WriteFailure
from officeparty.customers.codec import CustomerCodec, default_codec
from officeparty.domain.models import Customer

logger = logging.getLogger(__name__)


def read_customers(stream: TextIO, *, codec: CustomerCodec = default_codec) -> list[Customer]:
    """Decode every line of `stream`; an empty stream yields an empty list."""
    try:
        text = stream.read()
    except UnicodeDecodeError as exc:
        raise ParseFailure(f"customer list is not valid UTF-8: {exc}") from exc

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    customers: list[Customer] = []
    for line_number, line in enumerate(lines, start=1):
        try:
            customers.append(codec.decode(line.removesuffix("\r")))
        except ParseFailure as exc:
            raise ParseFailure(str(exc), line_number=line_number) from exc
    logger.debug("Decoded %s customers", len(customers))
    return customers


def write_customers(stream: TextIO, customers: Iterable[Customer], *, codec: CustomerCodec = default_codec) -> int:
    """Write one encoded customer per line; returns the number of characters written.

    The stream is flushed before returning, so buffered sinks fail here too. Lines
    written before a failing write stay written.
    """
    total = 0
    for customer in customers:
        line = codec.encode(customer) + "\n"
        try:
            stream.write(line)
        except OSError as exc:
            raise WriteFailure(f"unable to write customer {customer.user_id}: {exc}", written=total) from exc
        total += len(line)

    try:
        stream.flush()
    except OSError as exc:
        raise WriteFailure(f"unable to flush output: {exc}", written=total) from exc
    return total


def filter_customers(customers: Iterable[Customer], predicate: Callable[[Customer], bool]) -> list[Customer]:
    """Keep the customers matching `predicate`, in input order."""
    return [c for c in customers if predicate(c)]


def sort_by_id(customers: Iterable[Customer]) -> list[Customer]:
    """Ascending by `user_id`; equal ids keep their input order."""
    return sorted(customers, key=lambda c: c.user_id)
