"""
設計模式示範的共同介面。
每個示範提供名稱、描述、分類以及可執行的 demonstrate()。
"""
from abc import ABC, abstractmethod
from enum import Enum

from rich.console import Console

# 示範輸出一律原樣印出，不解析 rich markup
console = Console(markup=False, highlight=False, soft_wrap=True)


class PatternCategory(str, Enum):
    """GoF 設計模式的分類標籤。"""
    CREATIONAL = "Creational"
    STRUCTURAL = "Structural"
    BEHAVIORAL = "Behavioral"
    UNKNOWN = "Unknown"


class PatternDemo(ABC):
    """
    所有設計模式示範的基底 class。

    子 class 需設定 name、description 與 category，並實作 demonstrate()。
    demonstrate() 會將敘述印到主控台，也可能拋出例外。
    """

    name: str = ""
    description: str = ""
    category: str = PatternCategory.UNKNOWN.value

    @abstractmethod
    def demonstrate(self) -> None:
        """執行此模式的示範情境。"""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r} category={self.category!r}>"


def say(text: str = "") -> None:
    """印出一行示範敘述。"""
    console.print(text)
