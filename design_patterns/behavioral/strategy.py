"""
策略模式示範：可在執行時切換的運費計算、付款與排序演算法。
"""
import random
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


@dataclass(frozen=True)
class Dimensions:
    length: Decimal
    width: Decimal
    height: Decimal

    @property
    def volume(self) -> Decimal:
        return self.length * self.width * self.height


@dataclass
class Package:
    weight: Decimal
    dimensions: Dimensions
    origin: str = ""
    destination: str = ""
    is_fragile: bool = False


@dataclass
class PaymentResult:
    is_successful: bool
    message: str
    transaction_id: str = ""


def _strategy_label(strategy: object) -> str:
    return type(strategy).__name__.replace("Strategy", "")


# 運費策略

class ShippingStrategy(ABC):
    """
    運費計算策略。

    費用 = 重量 * weight_rate + 體積 * volume_rate + 易碎附加費 + 固定附加費
    """
    weight_rate = Decimal("0")
    volume_rate = Decimal("0")
    fragile_charge = Decimal("0")
    surcharges: tuple = ()
    delivery_time = ""
    description = ""

    def calculate_cost(self, package: Package) -> Decimal:
        base_cost = package.weight * self.weight_rate
        size_factor = package.dimensions.volume * self.volume_rate
        fragile = self.fragile_charge if package.is_fragile else Decimal("0")
        return base_cost + size_factor + fragile + sum(self.surcharges, Decimal("0"))

    def get_estimated_delivery_time(self, package: Package) -> str:
        return self.delivery_time


class StandardShippingStrategy(ShippingStrategy):
    weight_rate = Decimal("2.50")
    volume_rate = Decimal("0.1")
    fragile_charge = Decimal("5.00")
    delivery_time = "5-7 business days"
    description = "Standard ground shipping with basic tracking"


class ExpressShippingStrategy(ShippingStrategy):
    weight_rate = Decimal("5.00")
    volume_rate = Decimal("0.15")
    fragile_charge = Decimal("10.00")
    surcharges = (Decimal("15.00"),)
    delivery_time = "2-3 business days"
    description = "Express shipping with priority handling and enhanced tracking"


class OvernightShippingStrategy(ShippingStrategy):
    weight_rate = Decimal("8.00")
    volume_rate = Decimal("0.25")
    fragile_charge = Decimal("20.00")
    surcharges = (Decimal("35.00"),)
    delivery_time = "Next business day by 10:30 AM"
    description = "Overnight delivery with signature confirmation"


class InternationalShippingStrategy(ShippingStrategy):
    weight_rate = Decimal("12.00")
    volume_rate = Decimal("0.3")
    fragile_charge = Decimal("25.00")
    # 國際運費與關稅
    surcharges = (Decimal("45.00"), Decimal("20.00"))
    delivery_time = "7-14 business days (customs dependent)"
    description = "International shipping with customs handling and insurance"


class ShippingCalculator:
    def __init__(self):
        self._strategy: Optional[ShippingStrategy] = None

    def set_strategy(self, strategy: ShippingStrategy) -> None:
        self._strategy = strategy

    def _require_strategy(self) -> ShippingStrategy:
        if self._strategy is None:
            raise RuntimeError("Shipping strategy not set")
        return self._strategy

    def calculate_shipping_cost(self, package: Package) -> Decimal:
        return self._require_strategy().calculate_cost(package)

    def get_estimated_delivery_time(self, package: Package) -> str:
        return self._require_strategy().get_estimated_delivery_time(package)


# 付款策略

class PaymentStrategy(ABC):
    @abstractmethod
    def process_payment(self, amount: Decimal) -> PaymentResult: ...

    @abstractmethod
    def validate_payment_details(self) -> bool: ...


class CreditCardPaymentStrategy(PaymentStrategy):
    def __init__(self, card_number: str, card_holder: str, cvv: str):
        self._card_number = card_number
        self._card_holder = card_holder
        self._cvv = cvv

    def process_payment(self, amount):
        transaction_id = f"CC{datetime.now():%Y%m%d%H%M%S}{random.randint(1000, 9999)}"
        return PaymentResult(True, f"Credit card payment of ${amount:.2f} processed successfully", transaction_id)

    def validate_payment_details(self):
        return all([self._card_number, self._card_holder, self._cvv])


class PayPalPaymentStrategy(PaymentStrategy):
    def __init__(self, email: str):
        self._email = email

    def process_payment(self, amount):
        transaction_id = f"PP{datetime.now():%Y%m%d}{random.randint(100000, 999999)}"
        return PaymentResult(True, f"PayPal payment of ${amount:.2f} processed via {self._email}", transaction_id)

    def validate_payment_details(self):
        return "@" in self._email


class BankTransferStrategy(PaymentStrategy):
    def __init__(self, account_number: str, routing_number: str):
        self._account_number = account_number
        self._routing_number = routing_number

    def process_payment(self, amount):
        transaction_id = f"BT{datetime.now():%Y%m%d}{random.randint(1000000, 9999999)}"
        return PaymentResult(True, f"Bank transfer of ${amount:.2f} initiated", transaction_id)

    def validate_payment_details(self):
        return bool(self._account_number and self._routing_number)


class CryptoPaymentStrategy(PaymentStrategy):
    def __init__(self, wallet_address: str):
        self._wallet_address = wallet_address

    def process_payment(self, amount):
        transaction_id = f"0x{random.getrandbits(31):X}{random.getrandbits(31):X}"
        return PaymentResult(True, f"Cryptocurrency payment of ${amount:.2f} initiated", transaction_id)

    def validate_payment_details(self):
        return len(self._wallet_address) >= 26


class PaymentProcessor:
    def __init__(self):
        self._payment_strategy: Optional[PaymentStrategy] = None

    def set_payment_strategy(self, strategy: PaymentStrategy) -> None:
        self._payment_strategy = strategy

    def process_payment(self, amount: Decimal) -> PaymentResult:
        if self._payment_strategy is None:
            return PaymentResult(False, "No payment strategy set")
        if not self._payment_strategy.validate_payment_details():
            return PaymentResult(False, "Invalid payment details")
        return self._payment_strategy.process_payment(amount)


# 排序策略

class SortStrategy(ABC):
    algorithm_name = ""

    @abstractmethod
    def sort(self, data: List[int]) -> None:
        """原地排序。"""


class BubbleSortStrategy(SortStrategy):
    algorithm_name = "Bubble Sort"

    def sort(self, data):
        n = len(data)
        for i in range(n - 1):
            for j in range(n - i - 1):
                if data[j] > data[j + 1]:
                    data[j], data[j + 1] = data[j + 1], data[j]


class QuickSortStrategy(SortStrategy):
    algorithm_name = "Quick Sort"

    def sort(self, data):
        self._quick_sort(data, 0, len(data) - 1)

    def _quick_sort(self, data: List[int], low: int, high: int) -> None:
        if low < high:
            pivot_index = self._partition(data, low, high)
            self._quick_sort(data, low, pivot_index - 1)
            self._quick_sort(data, pivot_index + 1, high)

    @staticmethod
    def _partition(data: List[int], low: int, high: int) -> int:
        pivot = data[high]
        i = low - 1
        for j in range(low, high):
            if data[j] < pivot:
                i += 1
                data[i], data[j] = data[j], data[i]
        data[i + 1], data[high] = data[high], data[i + 1]
        return i + 1


class MergeSortStrategy(SortStrategy):
    algorithm_name = "Merge Sort"

    def sort(self, data):
        data[:] = self._merge_sort(data)

    def _merge_sort(self, data: List[int]) -> List[int]:
        if len(data) <= 1:
            return list(data)
        mid = len(data) // 2
        left = self._merge_sort(data[:mid])
        right = self._merge_sort(data[mid:])

        merged: List[int] = []
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i] <= right[j]:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged


class DataSorter:
    def __init__(self):
        self._strategy: Optional[SortStrategy] = None

    def set_sorting_strategy(self, strategy: SortStrategy) -> None:
        self._strategy = strategy

    def sort(self, data: List[int]) -> None:
        if self._strategy is None:
            raise RuntimeError("Sorting strategy not set")
        self._strategy.sort(data)


class StrategyPatternDemo(PatternDemo):
    name = "Strategy"
    description = ("Defines a family of algorithms, encapsulates each one, and makes them interchangeable. "
                   "Useful when you have multiple ways to perform a task and want to choose the algorithm "
                   "at runtime based on context or configuration.")
    category = PatternCategory.BEHAVIORAL.value

    def demonstrate(self) -> None:
        say("Shipping Cost Calculation Strategy Example")
        say()
        self._demonstrate_shipping_strategies()
        say()
        self._demonstrate_payment_strategies()
        say()
        self._demonstrate_sorting_strategies()

    @staticmethod
    def _demonstrate_shipping_strategies() -> None:
        say("Shipping Cost Strategies:")

        package = Package(
            weight=Decimal("5.5"),
            dimensions=Dimensions(Decimal(12), Decimal(8), Decimal(6)),
            origin="New York, NY",
            destination="Los Angeles, CA",
            is_fragile=True,
        )
        calculator = ShippingCalculator()
        for strategy in (StandardShippingStrategy(), ExpressShippingStrategy(),
                         OvernightShippingStrategy(), InternationalShippingStrategy()):
            calculator.set_strategy(strategy)
            say(f"  {_strategy_label(strategy)}:")
            say(f"     Cost: ${calculator.calculate_shipping_cost(package):.2f}")
            say(f"     Delivery: {calculator.get_estimated_delivery_time(package)}")
            say()

    @staticmethod
    def _demonstrate_payment_strategies() -> None:
        say("Payment Processing Strategies:")

        processor = PaymentProcessor()
        amount = Decimal("250.00")
        strategies: List[PaymentStrategy] = [
            CreditCardPaymentStrategy("1234-5678-9012-3456", "John Doe", "123"),
            PayPalPaymentStrategy("john.doe@email.com"),
            BankTransferStrategy("123456789", "987654321"),
            CryptoPaymentStrategy("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"),
        ]
        for strategy in strategies:
            processor.set_payment_strategy(strategy)
            result = processor.process_payment(amount)
            say(f"  {_strategy_label(strategy)}:")
            say(f"     {'OK' if result.is_successful else 'FAILED'} {result.message}")
            say(f"     Reference: {result.transaction_id}")
            say()

    @staticmethod
    def _demonstrate_sorting_strategies() -> None:
        say("Data Sorting Strategies:")

        numbers = [64, 34, 25, 12, 22, 11, 90, 5]
        sorter = DataSorter()
        say(f"  Original data: [{', '.join(map(str, numbers))}]")
        say()

        for strategy in (BubbleSortStrategy(), QuickSortStrategy(), MergeSortStrategy()):
            data = list(numbers)
            sorter.set_sorting_strategy(strategy)
            start = time.perf_counter_ns()
            sorter.sort(data)
            elapsed = time.perf_counter_ns() - start
            say(f"  {_strategy_label(strategy)}:")
            say(f"     Result: [{', '.join(map(str, data))}]")
            say(f"     Time: {elapsed} ns")
            say()
