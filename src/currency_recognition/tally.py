"""Running total of scanned currency and spoken-style descriptions."""

from __future__ import annotations

from typing import Dict, List, Optional

from .classifier import ClassificationResult
from .templates import ShapeClass


def describe(result: ClassificationResult, total: Optional[float] = None) -> str:
    kind = "Note" if result.kind is ShapeClass.NOTE else "Coin"
    text = (
        f"{kind} recognized: {result.denomination} {result.currency}. "
        f"Confidence: {result.confidence} percent."
    )
    if total is not None:
        text += f" Total amount: {total:.2f} {result.currency}."
    return text


class RunningTotal:
    """Accumulate face values of scanned items, per currency."""

    def __init__(self) -> None:
        self._items: List[ClassificationResult] = []
        self._totals: Dict[str, float] = {}

    def add(self, result: ClassificationResult) -> float:
        """Record an item and return the new total for its currency."""
        self._items.append(result)
        total = round(self._totals.get(result.currency, 0.0) + result.value, 2)
        self._totals[result.currency] = total
        return total

    def clear(self) -> str:
        """Forget everything scanned so far and return the spoken confirmation."""
        self._items.clear()
        self._totals.clear()
        return "Total cleared. Ready to scan new currency."

    @property
    def items(self) -> List[ClassificationResult]:
        return list(self._items)

    @property
    def count(self) -> int:
        return len(self._items)

    def total(self, currency: str) -> float:
        return self._totals.get(currency, 0.0)

    def summary(self) -> str:
        if not self._items:
            return "Nothing scanned yet."
        amounts = ", ".join(f"{amount:.2f} {currency}" for currency, amount in self._totals.items())
        return f"Total amount scanned: {amounts}. You have scanned {self.count} items."
