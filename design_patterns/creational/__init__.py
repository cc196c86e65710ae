"""
創建型設計模式示範。
"""

from design_patterns.creational.abstract_factory import AbstractFactoryPatternDemo
from design_patterns.creational.builder import BuilderPatternDemo
from design_patterns.creational.factory_method import FactoryMethodPatternDemo
from design_patterns.creational.prototype import PrototypePatternDemo
from design_patterns.creational.singleton import SingletonPatternDemo
