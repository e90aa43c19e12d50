"""Domain entity: a category used to group maintenance records."""

from dataclasses import dataclass


@dataclass
class Category:
    """A named, colour-coded bucket (Plumbing, HVAC, ...) that records point at."""

    name: str
    color: str
    id: int | None = None
