"""Adapter: expose a legacy XML rates service through a JSON-style interface."""
import xml.etree.ElementTree as ElementTree
from abc import ABC, abstractmethod
from typing import Dict, List


class RatesProvider(ABC):
    """Target interface expected by client code."""

    @abstractmethod
    def get_rates(self) -> Dict[str, float]:
        ...


class LegacyXmlRatesService:
    """Adaptee with an incompatible interface."""

    def fetch_xml(self) -> str:
        return '<rates><rate code="EUR">0.92</rate><rate code="GBP">0.79</rate></rates>'


class XmlRatesAdapter(RatesProvider):
    def __init__(self, service: LegacyXmlRatesService):
        self._service = service

    def get_rates(self) -> Dict[str, float]:
        root = ElementTree.fromstring(self._service.fetch_xml())
        return {rate.get("code"): float(rate.text) for rate in root.findall("rate")}


def convert(provider: RatesProvider, amount: float, currency: str) -> float:
    return round(amount * provider.get_rates()[currency], 2)


def demo() -> List[str]:
    provider = XmlRatesAdapter(LegacyXmlRatesService())
    return [f"100 USD = {convert(provider, 100, 'EUR')} EUR"]
