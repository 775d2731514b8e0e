"""Strategy: interchangeable shipping cost algorithms."""
from abc import ABC, abstractmethod
from typing import List


class ShippingStrategy(ABC):
    @abstractmethod
    def cost(self, weight_kg: float) -> float:
        ...


class FlatRate(ShippingStrategy):
    def cost(self, weight_kg: float) -> float:
        return 5.0


class PerKilogram(ShippingStrategy):
    def __init__(self, rate: float = 1.5):
        self.rate = rate

    def cost(self, weight_kg: float) -> float:
        return round(weight_kg * self.rate, 2)


class FreeOverThreshold(ShippingStrategy):
    def __init__(self, fallback: ShippingStrategy, threshold_kg: float = 20.0):
        self.fallback = fallback
        self.threshold_kg = threshold_kg

    def cost(self, weight_kg: float) -> float:
        if weight_kg >= self.threshold_kg:
            return 0.0
        return self.fallback.cost(weight_kg)


class Order:
    """Context: delegates the calculation to its strategy."""

    def __init__(self, weight_kg: float, strategy: ShippingStrategy):
        self.weight_kg = weight_kg
        self.strategy = strategy

    def shipping_cost(self) -> float:
        return self.strategy.cost(self.weight_kg)


def demo() -> List[str]:
    order = Order(12.0, FlatRate())
    lines = [f"flat: {order.shipping_cost()}"]
    order.strategy = PerKilogram()
    lines.append(f"per kg: {order.shipping_cost()}")
    order.strategy = FreeOverThreshold(PerKilogram(), threshold_kg=10)
    lines.append(f"free over 10kg: {order.shipping_cost()}")
    return lines
