"""
設計模式示範的註冊表與目錄。
以明確的清單列出所有示範，啟動時建立每個示範的實例，並依名稱排序與依分類分組。
"""
import logging
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from rich.console import Console
from rich.markup import escape

from design_patterns.pattern_demo import PatternCategory, PatternDemo
from design_patterns.creational import (
    AbstractFactoryPatternDemo,
    BuilderPatternDemo,
    FactoryMethodPatternDemo,
    PrototypePatternDemo,
    SingletonPatternDemo,
)
from design_patterns.structural import (
    AdapterPatternDemo,
    BridgePatternDemo,
    CompositePatternDemo,
    DecoratorPatternDemo,
    FacadePatternDemo,
    FlyweightPatternDemo,
    ProxyPatternDemo,
)
from design_patterns.behavioral import (
    ChainOfResponsibilityPatternDemo,
    CommandPatternDemo,
    InterpreterPatternDemo,
    IteratorPatternDemo,
    MediatorPatternDemo,
    MementoPatternDemo,
    ObserverPatternDemo,
    StatePatternDemo,
    StrategyPatternDemo,
    TemplateMethodPatternDemo,
    VisitorPatternDemo,
)

logger = logging.getLogger(__name__)

DemoFactory = Callable[[], PatternDemo]

# 所有已知的示範，新增示範時在此登記
DEMO_CLASSES: Tuple[DemoFactory, ...] = (
    AbstractFactoryPatternDemo,
    BuilderPatternDemo,
    FactoryMethodPatternDemo,
    PrototypePatternDemo,
    SingletonPatternDemo,
    AdapterPatternDemo,
    BridgePatternDemo,
    CompositePatternDemo,
    DecoratorPatternDemo,
    FacadePatternDemo,
    FlyweightPatternDemo,
    ProxyPatternDemo,
    ChainOfResponsibilityPatternDemo,
    CommandPatternDemo,
    InterpreterPatternDemo,
    IteratorPatternDemo,
    MediatorPatternDemo,
    MementoPatternDemo,
    ObserverPatternDemo,
    StatePatternDemo,
    StrategyPatternDemo,
    TemplateMethodPatternDemo,
    VisitorPatternDemo,
)


def category_of(demo: PatternDemo) -> str:
    """取得示範的分類標籤，未設定時返回 "Unknown"。"""
    category = getattr(demo, "category", None)
    if isinstance(category, PatternCategory):
        return category.value
    if isinstance(category, str) and category:
        return category
    return PatternCategory.UNKNOWN.value


def _factory_name(factory: DemoFactory) -> str:
    return getattr(factory, "__name__", repr(factory))


class PatternCatalog:
    """已建立實例且依名稱排序的設計模式示範集合。"""

    def __init__(self,
                 factories: Optional[Iterable[DemoFactory]] = None,
                 console: Optional[Console] = None):
        """
        初始化目錄並立即探索所有示範。

        Args:
            factories: 示範的建構函數，預設為 DEMO_CLASSES
            console: 用於顯示警告的主控台
        """
        self._factories: Tuple[DemoFactory, ...] = tuple(DEMO_CLASSES if factories is None else factories)
        self._console = console or Console()
        self._patterns: Tuple[PatternDemo, ...] = tuple(self.discover())
        logger.debug(f"Pattern catalog built with {len(self._patterns)} of {len(self._factories)} demos")

    @property
    def patterns(self) -> Tuple[PatternDemo, ...]:
        return self._patterns

    def discover(self) -> List[PatternDemo]:
        """
        為每個已登記的示範建立一個實例。

        單一示範建構失敗時只會發出警告並略過，不影響其他示範。

        Returns:
            依顯示名稱升冪排序的示範列表
        """
        patterns: List[PatternDemo] = []

        for factory in self._factories:
            try:
                patterns.append(factory())
            except Exception as e:
                name = _factory_name(factory)
                logger.warning(f"Could not create instance of {name}: {e}")
                self._console.print(f"[yellow]Warning: Could not create instance of {escape(name)}: {escape(str(e))}[/]")

        return sorted(patterns, key=lambda p: p.name)

    def filter_by_category(self, label: str) -> List[PatternDemo]:
        """
        取得指定分類的示範（區分大小寫的完全比對）。

        Args:
            label: 分類標籤，例如 "Structural"

        Returns:
            符合分類的示範列表，沒有符合時返回空列表
        """
        return [p for p in self._patterns if category_of(p) == label]

    def group_by_category(self) -> Dict[str, List[PatternDemo]]:
        """
        依分類分組所有示範。

        Returns:
            以分類標籤升冪排序為鍵、依名稱排序的示範列表為值的字典
        """
        groups: Dict[str, List[PatternDemo]] = {}
        for pattern in self._patterns:
            groups.setdefault(category_of(pattern), []).append(pattern)

        return {label: sorted(groups[label], key=lambda p: p.name) for label in sorted(groups)}

    def find(self, name: str) -> Optional[PatternDemo]:
        """依顯示名稱（不分大小寫）尋找示範。"""
        wanted = name.strip().lower()
        for pattern in self._patterns:
            if pattern.name.lower() == wanted:
                return pattern
        return None

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[PatternDemo]:
        return iter(self._patterns)

    def __getitem__(self, index: int) -> PatternDemo:
        return self._patterns[index]
