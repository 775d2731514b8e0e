"""Flyweight: many trees share a few cached TreeType objects."""
from typing import Dict, List, Tuple


class TreeType:
    """Intrinsic, shared state."""

    def __init__(self, name: str, color: str, texture: str):
        self.name = name
        self.color = color
        self.texture = texture

    def draw(self, x: int, y: int) -> str:
        return f"{self.color} {self.name} at ({x}, {y})"


class TreeFactory:
    """Caches TreeType instances by their intrinsic state."""

    _tree_types: Dict[Tuple[str, str, str], TreeType] = {}

    @classmethod
    def get_tree_type(cls, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        if key not in cls._tree_types:
            cls._tree_types[key] = TreeType(name, color, texture)
        return cls._tree_types[key]

    @classmethod
    def cache_size(cls) -> int:
        return len(cls._tree_types)

    @classmethod
    def clear(cls) -> None:
        cls._tree_types.clear()


class Tree:
    """Extrinsic state: position, plus a reference to the shared type."""

    def __init__(self, x: int, y: int, tree_type: TreeType):
        self.x = x
        self.y = y
        self.tree_type = tree_type

    def draw(self) -> str:
        return self.tree_type.draw(self.x, self.y)


class Forest:
    def __init__(self):
        self.trees: List[Tree] = []

    def plant(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, TreeFactory.get_tree_type(name, color, texture))
        self.trees.append(tree)
        return tree


def demo() -> List[str]:
    TreeFactory.clear()
    forest = Forest()
    for i in range(1000):
        forest.plant(i, i * 2, "oak", "green", "rough")
        forest.plant(i, i * 3, "birch", "white", "smooth")
    return [
        f"trees planted: {len(forest.trees)}",
        f"tree types cached: {TreeFactory.cache_size()}",
        forest.trees[1].draw(),
    ]
