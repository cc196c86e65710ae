"""
結構型設計模式示範。
"""

from design_patterns.structural.adapter import AdapterPatternDemo
from design_patterns.structural.bridge import BridgePatternDemo
from design_patterns.structural.composite import CompositePatternDemo
from design_patterns.structural.decorator import DecoratorPatternDemo
from design_patterns.structural.facade import FacadePatternDemo
from design_patterns.structural.flyweight import FlyweightPatternDemo
from design_patterns.structural.proxy import ProxyPatternDemo
