"""
直譯器模式示範：以運算式樹評估折扣規則。

規則語法（由低到高優先順序）：
    or / and / not
    比較運算 == != < <= > >=
    + -
    * /
    數字、變數名稱、括號
"""
import re
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, List, Tuple, Union

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say

Value = Union[Decimal, bool]
Context = Dict[str, Value]


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: Context) -> Value: ...


class Number(Expression):
    def __init__(self, value: Decimal):
        self.value = value

    def interpret(self, context):
        return self.value

    def __repr__(self):
        return str(self.value)


class Variable(Expression):
    def __init__(self, name: str):
        self.name = name

    def interpret(self, context):
        if self.name not in context:
            raise KeyError(f"Unknown variable: {self.name}")
        return context[self.name]

    def __repr__(self):
        return self.name


class BinaryExpression(Expression):
    symbol = ""

    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def interpret(self, context):
        return self.apply(self.left.interpret(context), self.right.interpret(context))

    @abstractmethod
    def apply(self, left: Value, right: Value) -> Value: ...

    def __repr__(self):
        return f"({self.left!r} {self.symbol} {self.right!r})"


class Add(BinaryExpression):
    symbol = "+"

    def apply(self, left, right):
        return left + right


class Subtract(BinaryExpression):
    symbol = "-"

    def apply(self, left, right):
        return left - right


class Multiply(BinaryExpression):
    symbol = "*"

    def apply(self, left, right):
        return left * right


class Divide(BinaryExpression):
    symbol = "/"

    def apply(self, left, right):
        if right == 0:
            raise ZeroDivisionError("Division by zero in rule expression")
        return left / right


class Comparison(BinaryExpression):
    _operators = {
        "==": lambda a, b: a == b,
        "!=": lambda a, b: a != b,
        "<": lambda a, b: a < b,
        "<=": lambda a, b: a <= b,
        ">": lambda a, b: a > b,
        ">=": lambda a, b: a >= b,
    }

    def __init__(self, symbol: str, left: Expression, right: Expression):
        super().__init__(left, right)
        self.symbol = symbol

    def apply(self, left, right):
        return self._operators[self.symbol](left, right)


class And(BinaryExpression):
    symbol = "and"

    def interpret(self, context):
        # 短路求值
        return bool(self.left.interpret(context)) and bool(self.right.interpret(context))

    def apply(self, left, right):
        return bool(left) and bool(right)


class Or(BinaryExpression):
    symbol = "or"

    def interpret(self, context):
        return bool(self.left.interpret(context)) or bool(self.right.interpret(context))

    def apply(self, left, right):
        return bool(left) or bool(right)


class Not(Expression):
    def __init__(self, operand: Expression):
        self.operand = operand

    def interpret(self, context):
        return not self.operand.interpret(context)

    def __repr__(self):
        return f"(not {self.operand!r})"


_TOKEN_PATTERN = re.compile(r"\s*(?:(\d+(?:\.\d+)?)|([A-Za-z_]\w*)|(==|!=|<=|>=|[-+*/()<>]))")


def tokenize(text: str) -> List[Tuple[str, str]]:
    """
    將規則字串切成 (種類, 內容) 的 token 列表。

    Raises:
        SyntaxError: 無法辨識的字元
    """
    tokens: List[Tuple[str, str]] = []
    position = 0
    text = text.rstrip()
    while position < len(text):
        match = _TOKEN_PATTERN.match(text, position)
        if not match:
            raise SyntaxError(f"Unexpected character at position {position}: {text[position]!r}")
        number, name, operator = match.groups()
        if number:
            tokens.append(("number", number))
        elif name:
            tokens.append(("keyword" if name in ("and", "or", "not") else "name", name))
        else:
            tokens.append(("op", operator))
        position = match.end()
    return tokens


class RuleParser:
    """將規則字串解析為 Expression 樹的遞迴下降解析器。"""

    def __init__(self, text: str):
        self._tokens = tokenize(text)
        self._index = 0

    def parse(self) -> Expression:
        expression = self._parse_or()
        if self._index != len(self._tokens):
            raise SyntaxError(f"Unexpected token: {self._tokens[self._index][1]!r}")
        return expression

    def _peek(self) -> Tuple[str, str]:
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return ("end", "")

    def _advance(self) -> Tuple[str, str]:
        token = self._peek()
        self._index += 1
        return token

    def _parse_or(self) -> Expression:
        expression = self._parse_and()
        while self._peek() == ("keyword", "or"):
            self._advance()
            expression = Or(expression, self._parse_and())
        return expression

    def _parse_and(self) -> Expression:
        expression = self._parse_not()
        while self._peek() == ("keyword", "and"):
            self._advance()
            expression = And(expression, self._parse_not())
        return expression

    def _parse_not(self) -> Expression:
        if self._peek() == ("keyword", "not"):
            self._advance()
            return Not(self._parse_not())
        return self._parse_comparison()

    def _parse_comparison(self) -> Expression:
        expression = self._parse_sum()
        kind, value = self._peek()
        if kind == "op" and value in Comparison._operators:
            self._advance()
            expression = Comparison(value, expression, self._parse_sum())
        return expression

    def _parse_sum(self) -> Expression:
        expression = self._parse_product()
        while self._peek() in (("op", "+"), ("op", "-")):
            operator = self._advance()[1]
            right = self._parse_product()
            expression = Add(expression, right) if operator == "+" else Subtract(expression, right)
        return expression

    def _parse_product(self) -> Expression:
        expression = self._parse_atom()
        while self._peek() in (("op", "*"), ("op", "/")):
            operator = self._advance()[1]
            right = self._parse_atom()
            expression = Multiply(expression, right) if operator == "*" else Divide(expression, right)
        return expression

    def _parse_atom(self) -> Expression:
        kind, value = self._advance()
        if kind == "number":
            return Number(Decimal(value))
        if kind == "name":
            return Variable(value)
        if (kind, value) == ("op", "("):
            expression = self._parse_or()
            if self._advance() != ("op", ")"):
                raise SyntaxError("Missing closing parenthesis")
            return expression
        raise SyntaxError(f"Unexpected token: {value or 'end of rule'!r}")


def parse_rule(text: str) -> Expression:
    return RuleParser(text).parse()


class InterpreterPatternDemo(PatternDemo):
    name = "Interpreter"
    description = ("Defines a grammar for a simple language and an interpreter that evaluates sentences in it. "
                   "Useful for rule engines, query filters and configuration expressions.")
    category = PatternCategory.BEHAVIORAL.value

    def demonstrate(self) -> None:
        say("Discount Rule Interpreter Example")
        say()

        customers: List[Tuple[str, Context]] = [
            ("Alice", {"age": Decimal(34), "orders": Decimal(12), "total": Decimal("540.00"), "member": True}),
            ("Bob", {"age": Decimal(17), "orders": Decimal(2), "total": Decimal("80.00"), "member": False}),
            ("Carol", {"age": Decimal(68), "orders": Decimal(5), "total": Decimal("210.00"), "member": True}),
        ]
        rules = [
            ("Loyalty discount", "member and orders >= 10"),
            ("Senior discount", "age >= 65 or (member and total > 500)"),
            ("Minor restriction", "not age >= 18"),
        ]

        say("Parsed rules:")
        parsed = [(label, parse_rule(text)) for label, text in rules]
        for (label, text), (_, expression) in zip(rules, parsed):
            say(f"  {label}: {text}")
            say(f"     Tree: {expression!r}")
        say()

        say("Evaluating rules per customer:")
        for customer_name, context in customers:
            matched = [label for label, expression in parsed if expression.interpret(context)]
            say(f"  {customer_name}: {', '.join(matched) if matched else 'no rules matched'}")
        say()

        say("Arithmetic expressions:")
        context: Context = {"price": Decimal("120.00"), "quantity": Decimal(3), "discount": Decimal("0.15")}
        for text in ("price * quantity", "price * quantity * (1 - discount)", "(price + 30) / quantity"):
            say(f"  {text} = {parse_rule(text).interpret(context):.2f}")
        say()

        say("Invalid rule:")
        try:
            parse_rule("total > ")
        except SyntaxError as e:
            say(f"  Rejected: {e}")
