"""
樣板方法模式示範：泡茶與沖咖啡共用同一套流程。
"""
from abc import ABC, abstractmethod

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class Beverage(ABC):
    def prepare_recipe(self) -> None:
        """樣板方法，步驟順序固定。"""
        self._boil_water()
        self.brew()
        self._pour_in_cup()
        self.add_condiments()

    def _boil_water(self) -> None:
        say("Boiling water")

    def _pour_in_cup(self) -> None:
        say("Pouring into cup")

    @abstractmethod
    def brew(self) -> None: ...

    @abstractmethod
    def add_condiments(self) -> None: ...


class Tea(Beverage):
    def brew(self):
        say("Steeping the tea")

    def add_condiments(self):
        say("Adding lemon")


class Coffee(Beverage):
    def brew(self):
        say("Dripping coffee through filter")

    def add_condiments(self):
        say("Adding sugar and milk")


class TemplateMethodPatternDemo(PatternDemo):
    name = "Template Method"
    description = "Defines the skeleton of an algorithm, letting subclasses override specific steps."
    category = PatternCategory.BEHAVIORAL.value

    def demonstrate(self) -> None:
        say("Beverage Template Method Example")

        say("Making tea:")
        Tea().prepare_recipe()

        say("\nMaking coffee:")
        Coffee().prepare_recipe()
