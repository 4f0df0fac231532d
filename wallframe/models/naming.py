"""Member naming — lumber-yard style names plus per-wall id counters."""

from __future__ import annotations
from pydantic import BaseModel

FRACTIONS = ["", "1/8", "1/4", "3/8", "1/2", "5/8", "3/4", "7/8"]


def format_inches(inches: float) -> str:
    """92.625 -> '92 5/8'. Lengths off the eighth-inch grid keep two decimals."""
    eighths = round(inches * 8)
    if abs(inches - eighths / 8) >= 0.01:
        return f"{inches:.2f}"
    whole, rest = divmod(eighths, 8)
    return f"{whole} {FRACTIONS[rest]}" if rest else f"{whole}"


class MemberNamer(BaseModel):
    """
    Hands out member names and ids for a single generation pass.

    Names group identical pieces ("2x4x92 5/8 Stud"); ids append a
    running count per name ("2x4x92 5/8 Stud 3"). A new namer starts
    every pass so repeated generation yields the same ids.
    """
    counters: dict[str, int] = {}

    def name(self, size: str, length: float, kind: str) -> str:
        return f"{size}x{format_inches(length)} {kind[:1].upper()}{kind[1:]}"

    def allocate(self, size: str, length: float, kind: str) -> tuple[str, str]:
        """Return (id, name) and advance the counter for that name."""
        name = self.name(size, length, kind)
        count = self.counters.get(name, 0) + 1
        self.counters[name] = count
        return f"{name} {count}", name
