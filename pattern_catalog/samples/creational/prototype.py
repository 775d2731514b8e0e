"""Prototype: create new documents by cloning a configured original."""
import copy
from typing import Dict, List


class Document:
    def __init__(self, title: str, sections: List[str], metadata: Dict[str, str]):
        self.title = title
        self.sections = sections
        self.metadata = metadata

    def clone(self, **changes) -> "Document":
        """Deep copy so that nested lists and dicts are not shared."""
        duplicate = copy.deepcopy(self)
        for name, value in changes.items():
            setattr(duplicate, name, value)
        return duplicate


class PrototypeRegistry:
    def __init__(self):
        self._prototypes: Dict[str, Document] = {}

    def register(self, name: str, prototype: Document) -> None:
        self._prototypes[name] = prototype

    def create(self, name: str, **changes) -> Document:
        return self._prototypes[name].clone(**changes)


def demo() -> List[str]:
    registry = PrototypeRegistry()
    registry.register("report", Document("Report", ["Summary", "Details"], {"author": "team"}))
    copy_a = registry.create("report", title="Q1 Report")
    copy_a.sections.append("Appendix")
    original = registry.create("report")
    return [
        f"clone: {copy_a.title} {copy_a.sections}",
        f"original untouched: {original.title} {original.sections}",
    ]
