"""
訪問者模式示範：在不修改圖形 class 的前提下計算面積與周長。
"""
import math
from abc import ABC, abstractmethod
from typing import List

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class Shape(ABC):
    @abstractmethod
    def accept(self, visitor: "ShapeVisitor") -> float: ...


class Circle(Shape):
    def __init__(self, radius: float):
        self.radius = radius

    def accept(self, visitor):
        return visitor.visit_circle(self)


class Rectangle(Shape):
    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height

    def accept(self, visitor):
        return visitor.visit_rectangle(self)


class Triangle(Shape):
    def __init__(self, base: float, height: float):
        self.base = base
        self.height = height

    def accept(self, visitor):
        return visitor.visit_triangle(self)


class ShapeVisitor(ABC):
    @abstractmethod
    def visit_circle(self, circle: Circle) -> float: ...

    @abstractmethod
    def visit_rectangle(self, rectangle: Rectangle) -> float: ...

    @abstractmethod
    def visit_triangle(self, triangle: Triangle) -> float: ...


class AreaCalculator(ShapeVisitor):
    def visit_circle(self, circle):
        area = math.pi * circle.radius * circle.radius
        say(f"Circle area: {area:.2f}")
        return area

    def visit_rectangle(self, rectangle):
        area = rectangle.width * rectangle.height
        say(f"Rectangle area: {area:.2f}")
        return area

    def visit_triangle(self, triangle):
        area = 0.5 * triangle.base * triangle.height
        say(f"Triangle area: {area:.2f}")
        return area


class PerimeterCalculator(ShapeVisitor):
    def visit_circle(self, circle):
        perimeter = 2 * math.pi * circle.radius
        say(f"Circle perimeter: {perimeter:.2f}")
        return perimeter

    def visit_rectangle(self, rectangle):
        perimeter = 2 * (rectangle.width + rectangle.height)
        say(f"Rectangle perimeter: {perimeter:.2f}")
        return perimeter

    def visit_triangle(self, triangle):
        # 視為直角三角形
        hypotenuse = math.hypot(triangle.base, triangle.height)
        perimeter = triangle.base + triangle.height + hypotenuse
        say(f"Triangle perimeter: {perimeter:.2f}")
        return perimeter


class VisitorPatternDemo(PatternDemo):
    name = "Visitor"
    description = "Defines operations to be performed on elements without changing their classes."
    category = PatternCategory.BEHAVIORAL.value

    def demonstrate(self) -> None:
        say("Shape Visitor Example")

        shapes: List[Shape] = [Circle(5), Rectangle(4, 6), Triangle(3, 4)]

        say("Calculating areas:")
        area_calculator = AreaCalculator()
        for shape in shapes:
            shape.accept(area_calculator)

        say("\nCalculating perimeters:")
        perimeter_calculator = PerimeterCalculator()
        for shape in shapes:
            shape.accept(perimeter_calculator)
