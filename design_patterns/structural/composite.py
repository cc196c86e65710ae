"""
組合模式示範：以樹狀結構表示資料夾與檔案。
"""
from abc import ABC, abstractmethod
from typing import List

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class FileSystemItem(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def get_size(self) -> int: ...

    @abstractmethod
    def display(self, depth: int = 0) -> None: ...


class File(FileSystemItem):
    def __init__(self, name: str, size: int):
        super().__init__(name)
        self.size = size

    def get_size(self):
        return self.size

    def display(self, depth=0):
        say(f"{'  ' * depth}{self.name} ({self.size} KB)")


class Folder(FileSystemItem):
    def __init__(self, name: str):
        super().__init__(name)
        self.items: List[FileSystemItem] = []

    def add(self, item: FileSystemItem) -> None:
        self.items.append(item)

    def remove(self, item: FileSystemItem) -> None:
        self.items.remove(item)

    def get_size(self):
        return sum(item.get_size() for item in self.items)

    def display(self, depth=0):
        say(f"{'  ' * depth}{self.name}/")
        for item in self.items:
            item.display(depth + 1)


class CompositePatternDemo(PatternDemo):
    name = "Composite"
    description = "Composes objects into tree structures to represent part-whole hierarchies."
    category = PatternCategory.STRUCTURAL.value

    def demonstrate(self) -> None:
        say("File System Composite Example")

        root = Folder("Root")
        docs = Folder("Documents")
        pics = Folder("Pictures")

        root.add(docs)
        root.add(pics)
        root.add(File("readme.txt", 5))

        docs.add(File("report.pdf", 100))
        docs.add(File("presentation.pptx", 200))

        pics.add(File("photo1.jpg", 50))
        pics.add(File("photo2.png", 75))

        say(f"Total size: {root.get_size()} KB")
        root.display()
