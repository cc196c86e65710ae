"""
主控台輸入的實用函數。
"""
import sys

import click
from rich.console import Console

PRESS_ANY_KEY = "Press any key to continue..."


def read_line(console: Console, prompt: str = "") -> str:
    """
    從主控台讀取一行輸入。

    Args:
        console: rich 主控台
        prompt: 提示文字

    Returns:
        使用者輸入的原始字串

    Raises:
        EOFError: 輸入已結束
    """
    return console.input(prompt)


def wait_for_key(console: Console, message: str = PRESS_ANY_KEY) -> None:
    """
    顯示提示並等待使用者按下任意鍵。

    非互動式輸入（管道或重新導向）時改為讀取一行。
    """
    console.print(f"\n{message}")
    if sys.stdin is not None and sys.stdin.isatty():
        click.getchar()
        return
    try:
        sys.stdin.readline()
    except (AttributeError, OSError):
        pass


def clear(console: Console) -> None:
    """清除主控台畫面。"""
    console.clear()
