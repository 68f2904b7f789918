"""Reduce raw indicator series to the finite numbers statistics can use."""
import logging
import math
import re
from collections.abc import Iterable, Mapping
from decimal import Decimal
from numbers import Real
from typing import Any, List, Optional

import numpy as np

logger = logging.getLogger(__name__)

# Plain decimal notation only: no "_" digit separators, no "nan"/"inf" words.
_NUMERIC_TEXT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def to_finite_float(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or None when it is not usable.

    Booleans are rejected even though they are ints. Numeric strings such as
    ``"2.5"`` or ``" 1e3 "`` are accepted because provider payloads often
    carry numbers as text. Python-only spellings such as ``"1_000"`` are not.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not _NUMERIC_TEXT.fullmatch(text):
            return None
        number = float(text)
    elif isinstance(value, (Real, Decimal, np.integer, np.floating)):
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def sanitize(raw: Iterable) -> List[float]:
    """Keep the finite numeric entries of ``raw`` in their original order.

    Missing values, NaN, infinities and non-numeric garbage are dropped, so the
    result may be empty. Sanitizing an already sanitized sample returns an
    equal list.

    Raises:
        TypeError: If ``raw`` is not a sequence of values (``None``, a scalar,
            a bare string or a mapping).
    """
    if raw is None or isinstance(raw, (str, bytes, Mapping)) or not isinstance(raw, Iterable):
        raise TypeError(f"Expected a sequence of values, got {type(raw).__name__}")

    values = []
    dropped = 0
    for item in raw:
        number = to_finite_float(item)
        if number is None:
            dropped += 1
            continue
        values.append(number)

    if dropped:
        logger.debug("Dropped %d non-finite or non-numeric entries", dropped)
    return values
