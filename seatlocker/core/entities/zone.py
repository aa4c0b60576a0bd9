from __future__ import annotations

import re
from enum import Enum
from typing import Any


class Zone(str, Enum):
    ZONE_A = "Zone_A"
    ZONE_B = "Zone_B"
    ZONE_C = "Zone_C"


# Lockers in this zone absorb demand from every other zone once it runs dry.
OVERFLOW_ZONE = Zone.ZONE_C

# Inclusive block ranges, checked in order.
BLOCK_RANGES: tuple[tuple[int, int, Zone], ...] = (
    (101, 110, Zone.ZONE_A),
    (201, 210, Zone.ZONE_B),
    (301, 320, Zone.ZONE_C),
)

_BLOCK_NUMBER = re.compile(r"[+-]?[0-9]+")


def parse_block_number(block: Any) -> int | None:
    """
    Parse a seat-block identifier given as text, an int or an integral float.

    Text must be an optionally signed run of ASCII digits, surrounding whitespace allowed.
    Returns None for anything else (booleans, "1_05", non-ASCII digits, "10.5").
    """
    if isinstance(block, bool):
        return None
    if isinstance(block, int):
        return block
    if isinstance(block, float):
        return int(block) if block.is_integer() else None

    text = str(block).strip()
    if _BLOCK_NUMBER.fullmatch(text) is None:
        return None
    return int(text)


def resolve_zone(block: Any) -> Zone | None:
    number = parse_block_number(block)
    if number is None:
        return None

    for low, high, zone in BLOCK_RANGES:
        if low <= number <= high:
            return zone
    return None
