"""Composite: files and folders share one interface; sizes add up recursively."""
from abc import ABC, abstractmethod
from typing import List, Optional


class Node(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def size(self) -> int:
        ...

    def render(self, indent: int = 0) -> List[str]:
        return [f"{'  ' * indent}{self.name} ({self.size()})"]


class File(Node):
    def __init__(self, name: str, size: int):
        super().__init__(name)
        self._size = size

    def size(self) -> int:
        return self._size


class Folder(Node):
    def __init__(self, name: str, children: Optional[List[Node]] = None):
        super().__init__(name)
        self.children: List[Node] = list(children or [])

    def add(self, node: Node) -> "Folder":
        self.children.append(node)
        return self

    def size(self) -> int:
        return sum(child.size() for child in self.children)

    def render(self, indent: int = 0) -> List[str]:
        lines = super().render(indent)
        for child in self.children:
            lines.extend(child.render(indent + 1))
        return lines


def demo() -> List[str]:
    root = Folder("project", [
        File("README.md", 120),
        Folder("src", [File("app.py", 300), File("util.py", 80)]),
    ])
    return root.render()
