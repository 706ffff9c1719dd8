"""Genomic coordinate range with independently optional bounds."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Region(BaseModel):
    """A chromosome range; ``start`` and ``end`` may each be unset.

    Bounds are not checked against each other: a reversed range is kept as
    given and simply matches nothing downstream.
    """

    model_config = {"frozen": True}

    chromosome: str | None = Field(default=None, description="Chromosome name (e.g. '1', 'X')")
    start: int | None = Field(default=None, description="Lower bound, inclusive")
    end: int | None = Field(default=None, description="Upper bound, inclusive")

    @classmethod
    def parse(cls, text: str) -> Region:
        """Parse ``chr``, ``chr:pos`` or ``chr:start-end``.

        Either side of the dash may be blank (``1:-200``, ``1:100-``) to leave
        that bound unset, and the chromosome may be omitted (``:100-200``).
        Blank text is an unbounded region. Raises ValueError on malformed input
        or when start is greater than end.
        """
        text = text.strip()
        chromosome, sep, coordinates = text.partition(":")
        chromosome = chromosome.strip() or None
        if not sep:
            return cls(chromosome=chromosome)

        coordinates = coordinates.strip()
        if "-" not in coordinates:
            position = _coordinate(coordinates, text)
            if position is None:
                raise ValueError(f"region {text!r} has no position after ':'")
            return cls(chromosome=chromosome, start=position, end=position)

        raw_start, _, raw_end = coordinates.partition("-")
        start = _coordinate(raw_start, text)
        end = _coordinate(raw_end, text)
        if start is not None and end is not None and start > end:
            raise ValueError(f"region {text!r} start {start} is greater than end {end}")
        return cls(chromosome=chromosome, start=start, end=end)

    def __str__(self) -> str:
        if self.start is None and self.end is None:
            return self.chromosome or ""
        start = "" if self.start is None else str(self.start)
        end = "" if self.end is None else str(self.end)
        return f"{self.chromosome or ''}:{start}-{end}"


def _coordinate(raw: str, text: str) -> int | None:
    raw = raw.strip()
    if not raw:
        return None
    if not raw.isdigit():
        raise ValueError(f"region {text!r} has a non-numeric coordinate {raw!r}")
    return int(raw)
