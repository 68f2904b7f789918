"""Validation of dashboard selections before statistics are requested."""
from dataclasses import dataclass, field
from datetime import date
from typing import Any, List, Optional, Sequence

from econstats.config import MAX_ENTITIES, MAX_PERIODS, MIN_YEAR


@dataclass
class SelectionValidation:
    """Outcome of :func:`validate_selection`; ``errors`` lists every failed rule."""

    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def validate_selection(
    indicator: Optional[str],
    entities: Optional[Sequence[str]],
    periods: Optional[Sequence[str]],
    max_entities: int = MAX_ENTITIES,
    max_periods: int = MAX_PERIODS,
) -> SelectionValidation:
    """Check that an indicator, entities and periods were chosen within limits."""
    errors = []
    if not indicator:
        errors.append("Select an indicator")
    if not entities:
        errors.append("Select at least one country, region or group")
    if not periods:
        errors.append("Select at least one period")
    if entities and len(entities) > max_entities:
        errors.append(f"At most {max_entities} entities are allowed")
    if periods and len(periods) > max_periods:
        errors.append(f"At most {max_periods} periods are allowed")
    return SelectionValidation(errors=errors)


def validate_year(year: Any, min_year: int = MIN_YEAR) -> bool:
    """True when ``year`` parses as an integer between ``min_year`` and this year."""
    try:
        numeric_year = int(str(year).strip())
    except (TypeError, ValueError):
        return False
    return min_year <= numeric_year <= date.today().year
