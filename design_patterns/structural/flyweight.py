"""
享元模式示範：大量樹木共用同一個樹種物件。
"""
import random
from typing import Dict, List, Tuple

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class TreeType:
    """樹木的共用（內在）狀態。"""

    def __init__(self, name: str, color: str, sprite: str):
        self.name = name
        self.color = color
        self.sprite = sprite

    def render(self, x: int, y: int) -> None:
        say(f"Rendering {self.color} {self.name} at ({x}, {y})")


class TreeTypeFactory:
    """快取並重用 TreeType。"""

    def __init__(self):
        self._tree_types: Dict[Tuple[str, str, str], TreeType] = {}

    @property
    def created_types(self) -> int:
        return len(self._tree_types)

    def get_tree_type(self, name: str, color: str, sprite: str) -> TreeType:
        key = (name, color, sprite)
        if key not in self._tree_types:
            self._tree_types[key] = TreeType(name, color, sprite)
        return self._tree_types[key]


class Tree:
    __slots__ = ("x", "y", "type")

    def __init__(self, x: int, y: int, tree_type: TreeType):
        self.x = x
        self.y = y
        self.type = tree_type

    def paint(self) -> None:
        self.type.render(self.x, self.y)


class Forest:
    def __init__(self, factory: TreeTypeFactory):
        self._factory = factory
        self.trees: List[Tree] = []

    @property
    def tree_count(self) -> int:
        return len(self.trees)

    def plant_tree(self, x: int, y: int, name: str, color: str, sprite: str) -> None:
        self.trees.append(Tree(x, y, self._factory.get_tree_type(name, color, sprite)))

    def paint(self, limit: int = 5) -> None:
        say(f"Painting forest (showing first {limit} trees):")
        for tree in self.trees[:limit]:
            tree.paint()
        if len(self.trees) > limit:
            say(f"... and {len(self.trees) - limit} more trees")


class FlyweightPatternDemo(PatternDemo):
    name = "Flyweight"
    description = "Uses sharing to efficiently support large numbers of similar objects."
    category = PatternCategory.STRUCTURAL.value

    def demonstrate(self) -> None:
        say("Tree Forest Flyweight Example")

        factory = TreeTypeFactory()
        forest = Forest(factory)
        for _ in range(1000):
            forest.plant_tree(random.randrange(100), random.randrange(100), "Oak", "Green", "tree.png")

        forest.paint()

        say(f"Created {forest.tree_count} trees")
        say(f"TreeType flyweights created: {factory.created_types}")
