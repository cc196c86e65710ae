"""
行為型設計模式示範。
"""

from design_patterns.behavioral.chain_of_responsibility import ChainOfResponsibilityPatternDemo
from design_patterns.behavioral.command import CommandPatternDemo
from design_patterns.behavioral.interpreter import InterpreterPatternDemo
from design_patterns.behavioral.iterator import IteratorPatternDemo
from design_patterns.behavioral.mediator import MediatorPatternDemo
from design_patterns.behavioral.memento import MementoPatternDemo
from design_patterns.behavioral.observer import ObserverPatternDemo
from design_patterns.behavioral.state import StatePatternDemo
from design_patterns.behavioral.strategy import StrategyPatternDemo
from design_patterns.behavioral.template_method import TemplateMethodPatternDemo
from design_patterns.behavioral.visitor import VisitorPatternDemo
