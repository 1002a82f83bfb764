from __future__ import annotations

from stockview.data.models import StockStatus


def classify(current: float, minimum: float, maximum: float) -> StockStatus:
    """Classify stock health against its thresholds.

    At or below the minimum is critical, at or below the midpoint of minimum and
    maximum is low, anything above is normal. Thresholds are used as given, even
    when maximum < minimum.
    """
    if current <= minimum:
        return StockStatus.CRITICAL
    if current <= (minimum + maximum) / 2:
        return StockStatus.LOW
    return StockStatus.NORMAL
