from __future__ import annotations

import math
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


@dataclass(frozen=True, slots=True)
class Reading:
    sensor: str
    celsius: float

    @property
    def missing(self) -> bool:
        return math.isnan(self.celsius)


_RAW = [
    ("kitchen", 21.5),
    ("cellar", math.nan),
    ("attic", 29.0),
    ("kitchen", 22.0),
    ("garage", 14.5),
    ("attic", math.nan),
    ("cellar", 12.0),
]


def read_sensors() -> Iterator[Reading]:
    """One-shot source, like a socket or a cursor over a table."""
    for sensor, celsius in _RAW:
        print(f"  pulled {sensor}")
        yield Reading(sensor, celsius)


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")
