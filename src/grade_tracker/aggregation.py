import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


# ------------------------
# Core logic
# ------------------------
def round_1dp_half_up(x: float) -> float:
    return float(Decimal(str(x)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _usable_pairs(pairs: Iterable[Tuple[Optional[float], float]]) -> np.ndarray:
    rows = []
    for value, weight in pairs:
        if value is None:
            continue
        if weight is None or float(weight) <= 0:
            logger.debug("Dropping non-positive weight %r for value %r", weight, value)
            continue
        rows.append((float(value), float(weight)))
    if not rows:
        return np.zeros((0, 2), dtype=float)
    return np.array(rows, dtype=float)


def weighted_mean_with_total(
    pairs: Iterable[Tuple[Optional[float], float]],
) -> Tuple[Optional[float], float]:
    """
    pairs: iterable of (value, weight)
    returns: (weighted mean or None, total weight used)

    Pairs with a None value or a weight <= 0 never contribute.
    """
    vw = _usable_pairs(pairs)
    if vw.size == 0:
        return None, 0.0

    values = vw[:, 0]
    weights = vw[:, 1]
    total_weight = float(weights.sum())
    if total_weight == 0:
        return None, 0.0

    # stays within [min, max] of the inputs so exact band edges survive
    mean = float(np.clip(np.dot(values, weights) / total_weight, values.min(), values.max()))
    return mean, total_weight


def weighted_mean(pairs: Iterable[Tuple[Optional[float], float]]) -> Optional[float]:
    """sum(value * weight) / sum(weight), or None when nothing carries weight."""
    mean, _ = weighted_mean_with_total(pairs)
    return mean
