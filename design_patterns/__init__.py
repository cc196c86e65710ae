"""
設計模式示範套件。
提供 23 種 GoF 設計模式的可執行示範，以及瀏覽它們的目錄與互動式選單。
"""

from design_patterns.pattern_demo import PatternCategory, PatternDemo
from design_patterns.patterns_registry import DEMO_CLASSES, PatternCatalog
from design_patterns.menu_manager import MenuController, MenuState
