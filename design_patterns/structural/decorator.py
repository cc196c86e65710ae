"""
裝飾者模式示範：咖啡配料與文字格式化。
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class Coffee(ABC):
    @abstractmethod
    def get_description(self) -> str: ...

    @abstractmethod
    def get_cost(self) -> Decimal: ...


class SimpleCoffee(Coffee):
    def get_description(self):
        return "Simple Coffee"

    def get_cost(self):
        return Decimal("2.00")


class EspressoCoffee(Coffee):
    def get_description(self):
        return "Espresso"

    def get_cost(self):
        return Decimal("3.50")


class DarkRoastCoffee(Coffee):
    def get_description(self):
        return "Dark Roast Coffee"

    def get_cost(self):
        return Decimal("2.75")


class CoffeeDecorator(Coffee):
    """
    配料裝飾者的基底 class。

    子 class 只需設定 ingredient 與 price。
    """
    ingredient = ""
    price = Decimal("0")

    def __init__(self, coffee: Coffee):
        self._coffee = coffee

    def get_description(self):
        return f"{self._coffee.get_description()}, {self.ingredient}"

    def get_cost(self):
        return self._coffee.get_cost() + self.price


class MilkDecorator(CoffeeDecorator):
    ingredient = "Milk"
    price = Decimal("0.50")


class SugarDecorator(CoffeeDecorator):
    ingredient = "Sugar"
    price = Decimal("0.25")


class WhippedCreamDecorator(CoffeeDecorator):
    ingredient = "Whipped Cream"
    price = Decimal("0.75")


class VanillaDecorator(CoffeeDecorator):
    ingredient = "Vanilla"
    price = Decimal("0.60")


class CaramelDecorator(CoffeeDecorator):
    ingredient = "Caramel"
    price = Decimal("0.80")


class ExtraShotDecorator(CoffeeDecorator):
    ingredient = "Extra Shot"
    price = Decimal("1.25")


class SoyMilkDecorator(CoffeeDecorator):
    ingredient = "Soy Milk"
    price = Decimal("0.65")


class TextComponent(ABC):
    @abstractmethod
    def render(self) -> str: ...


class PlainText(TextComponent):
    def __init__(self, text: str):
        self._text = text

    def render(self):
        return self._text


class TextDecorator(TextComponent):
    def __init__(self, component: TextComponent):
        self._component = component

    def render(self):
        return self._component.render()


class BoldDecorator(TextDecorator):
    def render(self):
        return f"**{self._component.render()}**"


class ItalicDecorator(TextDecorator):
    def render(self):
        return f"*{self._component.render()}*"


class UnderlineDecorator(TextDecorator):
    def render(self):
        return f"_{self._component.render()}_"


class ColorDecorator(TextDecorator):
    def __init__(self, component: TextComponent, color: str):
        super().__init__(component)
        self._color = color

    def render(self):
        return f"[{self._color}]{self._component.render()}[/{self._color}]"


class FontSizeDecorator(TextDecorator):
    def __init__(self, component: TextComponent, size: int):
        super().__init__(component)
        self._size = size

    def render(self):
        return f"<size={self._size}>{self._component.render()}</size>"


class BackgroundColorDecorator(TextDecorator):
    def __init__(self, component: TextComponent, background_color: str):
        super().__init__(component)
        self._background_color = background_color

    def render(self):
        return f"[bg={self._background_color}]{self._component.render()}[/bg]"


def _display_order(coffee: Coffee, order_name: Optional[str] = None) -> None:
    say(f"  {order_name or 'Order'}:")
    say(f"     {coffee.get_description()}")
    say(f"     Total: ${coffee.get_cost():.2f}")
    say()


class DecoratorPatternDemo(PatternDemo):
    name = "Decorator"
    description = ("Allows behavior to be added to objects dynamically without altering their structure. "
                   "Useful for extending functionality of objects in a flexible and composable way, "
                   "especially when you need multiple combinations of features.")
    category = PatternCategory.STRUCTURAL.value

    def demonstrate(self) -> None:
        say("Coffee Shop Decorator Pattern Example")
        say()

        say("Basic Coffee Orders:")
        _display_order(SimpleCoffee())
        _display_order(MilkDecorator(SimpleCoffee()))
        _display_order(SugarDecorator(SimpleCoffee()))
        _display_order(WhippedCreamDecorator(SimpleCoffee()))
        say()

        say("Complex Coffee Orders (Multiple Decorators):")
        _display_order(SugarDecorator(MilkDecorator(EspressoCoffee())), "Latte")
        _display_order(WhippedCreamDecorator(MilkDecorator(EspressoCoffee())), "Cappuccino")
        luxury = VanillaDecorator(WhippedCreamDecorator(CaramelDecorator(
            SugarDecorator(MilkDecorator(EspressoCoffee())))))
        _display_order(luxury, "Luxury Coffee")

        say("  Building custom order step by step:")
        custom: Coffee = DarkRoastCoffee()
        say(f"     1. Base: {custom.get_description()} - ${custom.get_cost():.2f}")
        for step, (label, decorator) in enumerate(
                [("+Milk", MilkDecorator), ("+Sugar", SugarDecorator), ("+Caramel", CaramelDecorator)], start=2):
            custom = decorator(custom)
            say(f"     {step}. {label}: {custom.get_description()} - ${custom.get_cost():.2f}")
        _display_order(custom, "Final Custom Order")
        say()

        say("Text Formatting Decorator Example:")
        texts = [
            PlainText("Hello, World!"),
            BoldDecorator(PlainText("Important Message")),
            ItalicDecorator(PlainText("Emphasized Text")),
            UnderlineDecorator(BoldDecorator(ItalicDecorator(PlainText("Fully Formatted Text")))),
            ColorDecorator(BoldDecorator(PlainText("Colorized Bold Text")), "Red"),
        ]
        for text in texts:
            say(f"  {text.render()}")
