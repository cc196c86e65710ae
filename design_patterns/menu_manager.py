"""
設計模式示範的互動式選單。
負責主選單、分類清單、執行示範與顯示全部模式之間的切換。
"""
import logging
from enum import Enum
from functools import partial
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

from design_patterns.pattern_demo import PatternCategory, PatternDemo
from design_patterns.patterns_registry import PatternCatalog
from utils import console_io

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Design Patterns Demo - 23 GoF Patterns"

# 主選單選項對應的分類
MENU_CATEGORIES = {
    "1": PatternCategory.CREATIONAL.value,
    "2": PatternCategory.STRUCTURAL.value,
    "3": PatternCategory.BEHAVIORAL.value,
}
SHOW_ALL_OPTION = "4"
BACK_OPTION = "0"


class MenuState(Enum):
    """選單狀態機的狀態。"""
    MAIN_MENU = "main_menu"
    CATEGORY_LIST = "category_list"
    PATTERN_DETAIL = "pattern_detail"
    ALL_PATTERNS_LIST = "all_patterns_list"
    TERMINATED = "terminated"


class MenuController:
    """
    互動式選單控制器。

    每次互動結束後都回到主選單，只有輸入 q/Q（或輸入結束）才會離開迴圈。
    單一示範的錯誤只會顯示在畫面上，不會中斷選單。
    """

    def __init__(self,
                 catalog: Optional[PatternCatalog] = None,
                 console: Optional[Console] = None,
                 read_line: Optional[Callable[[str], str]] = None,
                 wait_for_key: Optional[Callable[[], None]] = None,
                 clear_screen: bool = True,
                 title: str = DEFAULT_TITLE):
        """
        初始化選單控制器。

        Args:
            catalog: 設計模式目錄，預設會建立一個包含所有示範的目錄
            console: 用於輸出的 rich 主控台
            read_line: 讀取一行輸入的函數，參數為提示文字
            wait_for_key: 等待按鍵的函數
            clear_screen: 切換畫面時是否清除主控台
            title: 啟動時顯示的標題
        """
        self.console = console or Console()
        self.catalog = catalog if catalog is not None else PatternCatalog(console=self.console)
        self._read_line = read_line or partial(console_io.read_line, self.console)
        self._wait_for_key = wait_for_key or partial(console_io.wait_for_key, self.console)
        self.clear_screen = clear_screen
        self.title = title
        self.state = MenuState.MAIN_MENU

    def run(self) -> None:
        """顯示標題並執行主選單迴圈，直到使用者離開。"""
        self._clear()
        self.console.print(f"[bold blue]{escape(self.title)}[/]")
        self.console.print("=" * len(self.title))

        self.state = MenuState.MAIN_MENU
        while self.state != MenuState.TERMINATED:
            try:
                self.display_main_menu()
                choice = self._read_line("Select: ").strip()

                if not choice:
                    continue

                if choice.lower() == "q":
                    self.console.print("Exiting...")
                    self.state = MenuState.TERMINATED
                    break

                self.handle_menu_choice(choice)
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed, leaving the menu")
                self.console.print("\nExiting...")
                self.state = MenuState.TERMINATED

    def display_main_menu(self) -> None:
        self.console.print("\n[bold]Main Menu:[/]")
        self.console.print("1. Creational Patterns")
        self.console.print("2. Structural Patterns")
        self.console.print("3. Behavioral Patterns")
        self.console.print("4. Show All Patterns")
        self.console.print("Q. Quit")

    def handle_menu_choice(self, choice: str) -> MenuState:
        """
        處理主選單的選擇。

        Args:
            choice: 已去除空白的使用者輸入

        Returns:
            處理完成後的狀態
        """
        choice = choice.strip()

        if not choice:
            self.state = MenuState.MAIN_MENU
        elif choice.lower() == "q":
            self.console.print("Exiting...")
            self.state = MenuState.TERMINATED
        elif choice in MENU_CATEGORIES:
            self.show_pattern_category(MENU_CATEGORIES[choice])
        elif choice == SHOW_ALL_OPTION:
            self.show_all_patterns()
        else:
            self.console.print("[red]Invalid option. Try again.[/]")
            self.state = MenuState.MAIN_MENU

        return self.state

    def show_pattern_category(self, category: str) -> None:
        """列出分類中的示範，並執行使用者選擇的示範。"""
        self.state = MenuState.CATEGORY_LIST
        patterns: List[PatternDemo] = self.catalog.filter_by_category(category)

        if not patterns:
            self.console.print(f"[yellow]No patterns found for category: {escape(category)}[/]")
            self.state = MenuState.MAIN_MENU
            return

        self._clear()
        self.console.print(f"[bold]{escape(category)} Patterns:[/]")
        for i, pattern in enumerate(patterns, 1):
            self.console.print(f"{i}. {escape(pattern.name)}")
        self.console.print(f"{BACK_OPTION}. Back to Main Menu")

        choice = self._read_line("Select a pattern: ").strip()

        if choice == BACK_OPTION:
            self.state = MenuState.MAIN_MENU
            return

        try:
            index = int(choice)
        except ValueError:
            index = 0

        if 1 <= index <= len(patterns):
            self.demonstrate_pattern(patterns[index - 1])
        else:
            self.console.print("[red]Invalid selection.[/]")

        self._wait_for_key()
        self.state = MenuState.MAIN_MENU

    def show_all_patterns(self) -> None:
        """依分類列出所有示範。"""
        self.state = MenuState.ALL_PATTERNS_LIST
        self._clear()
        self.console.print("[bold]All Available Patterns:[/]")
        self.render_catalog()

        self._wait_for_key()
        self.state = MenuState.MAIN_MENU

    def render_catalog(self) -> None:
        for category, patterns in self.catalog.group_by_category().items():
            self.console.print(f"\n[bold cyan]{escape(category)}:[/]")
            for pattern in patterns:
                self.console.print(f"  - {escape(pattern.name)}")

    def demonstrate_pattern(self, pattern: PatternDemo) -> bool:
        """
        顯示示範的標題與描述並執行它。

        Args:
            pattern: 要執行的示範

        Returns:
            示範是否順利完成
        """
        self.state = MenuState.PATTERN_DETAIL
        self._clear()
        self.console.print(f"[bold green]{escape(pattern.name)} Pattern[/]")
        self.console.print("-" * (len(pattern.name) + 8))
        self.console.print(f"Description: {escape(pattern.description)}\n")

        try:
            pattern.demonstrate()
        except Exception as e:
            logger.error(f"Demonstration of {pattern.name} failed: {e}")
            logger.debug("Demonstration traceback", exc_info=True)
            self.console.print(f"[red]Error during demonstration: {escape(str(e))}[/]")
            return False

        return True

    def _clear(self) -> None:
        if self.clear_screen:
            console_io.clear(self.console)
