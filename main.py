"""
設計模式示範
以互動式選單瀏覽並執行 23 種 GoF 設計模式的示範。
"""
import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from config import load_config
from design_patterns.menu_manager import DEFAULT_TITLE, MenuController
from design_patterns.patterns_registry import PatternCatalog

# 初始化 Typer 應用程序和控制台
app = typer.Typer(help="Design Patterns Demo - 23 GoF Patterns")
console = Console()

# 全局狀態
config = None
clear_screen = True

logger = logging.getLogger(__name__)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context,
         config_path: str = typer.Option("config.json", "--config", help="配置文件的路徑"),
         verbose: bool = typer.Option(False, "--verbose", "-v", help="顯示詳細信息"),
         no_clear: bool = typer.Option(False, "--no-clear", help="切換畫面時不清除主控台")):
    """
    設計模式示範 - 依分類瀏覽並執行 GoF 設計模式。
    """
    global config, clear_screen

    # 加載配置
    config = load_config(config_path)

    # 設置日誌記錄
    log_level = getattr(logging, str(config.get('log_level', 'WARNING')).upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level if not verbose else logging.DEBUG,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    clear_screen = bool(config.get('clear_screen', True)) and not no_clear
    logger.debug(f"Configuration loaded from {config_path}: {config}")

    # 沒有指定子命令時直接進入互動式選單
    if ctx.invoked_subcommand is None:
        start_menu()


@app.command("menu")
def start_menu():
    """
    啟動互動式選單。
    """
    title = (config or {}).get('title') or DEFAULT_TITLE
    controller = MenuController(console=console, clear_screen=clear_screen, title=title)
    controller.run()


@app.command("list")
def list_patterns():
    """
    依分類列出所有設計模式示範。
    """
    catalog = PatternCatalog(console=console)

    console.print(f"[bold]All Available Patterns ({len(catalog)}):[/]")
    MenuController(catalog=catalog, console=console, clear_screen=False).render_catalog()


@app.command("run")
def run_pattern(
    name: str = typer.Argument(..., help="要執行的設計模式名稱，例如 \"Abstract Factory\"")
):
    """
    直接執行單一設計模式示範。
    """
    catalog = PatternCatalog(console=console)
    pattern = catalog.find(name)

    if pattern is None:
        console.print(f"[bold red]No pattern named '{escape(name)}'.[/]")
        console.print("使用 [cyan]python main.py list[/] 查看所有可用的模式。")
        raise typer.Exit(code=1)

    controller = MenuController(catalog=catalog, console=console, clear_screen=False)
    if not controller.demonstrate_pattern(pattern):
        raise typer.Exit(code=1)


def cli() -> None:
    """
    程式進入點，攔截所有未處理的例外。
    """
    try:
        app()
    except Exception as e:
        logger.debug("Unhandled application error", exc_info=True)
        console.print(f"[bold red]Application error:[/] {escape(str(e))}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
