"""
工廠方法模式示範：依付款類型建立付款處理器。
"""
import os
import random
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class PaymentProcessor(ABC):
    """所有付款處理器的抽象產品。"""

    @abstractmethod
    def process_payment(self, amount: Decimal) -> str:
        """處理付款並返回確認訊息。"""


class CreditCardProcessor(PaymentProcessor):
    def process_payment(self, amount):
        transaction_id = uuid.uuid4().hex[:8].upper()
        return f"Credit card payment of ${amount:.2f} processed. Transaction ID: {transaction_id}"


class PayPalProcessor(PaymentProcessor):
    def process_payment(self, amount):
        reference = f"PP-{datetime.now():%Y%m%d}-{random.randint(1000, 9999)}"
        return f"PayPal payment of ${amount:.2f} processed. Reference: {reference}"


class BankTransferProcessor(PaymentProcessor):
    def process_payment(self, amount):
        transfer_id = f"BT{datetime.now():%y%m%d}{random.randint(100000, 999999)}"
        return f"Bank transfer of ${amount:.2f} initiated. Transfer ID: {transfer_id}"


class CryptoProcessor(PaymentProcessor):
    def process_payment(self, amount):
        block_hash = os.urandom(4).hex().upper()
        return f"Cryptocurrency payment of ${amount:.2f} confirmed. Block: 0x{block_hash}"


class PaymentProcessorFactory:
    """依付款類型建立具體的付款處理器。"""

    _processors = {
        "credit-card": CreditCardProcessor,
        "creditcard": CreditCardProcessor,
        "paypal": PayPalProcessor,
        "bank-transfer": BankTransferProcessor,
        "banktransfer": BankTransferProcessor,
        "crypto": CryptoProcessor,
        "cryptocurrency": CryptoProcessor,
    }

    @classmethod
    def create_processor(cls, payment_type: str) -> PaymentProcessor:
        """
        建立付款處理器。

        Raises:
            ValueError: 不支援的付款類型
        """
        processor_class = cls._processors.get(payment_type.lower())
        if processor_class is None:
            raise ValueError(f"Unsupported payment type: {payment_type}")
        return processor_class()


class FactoryMethodPatternDemo(PatternDemo):
    name = "Factory Method"
    description = ("Creates objects without specifying their exact classes. "
                   "Useful when the type of object needs to be determined at runtime "
                   "based on configuration or user input.")
    category = PatternCategory.CREATIONAL.value

    def demonstrate(self) -> None:
        say("Payment Processing Factory Example")
        say()

        self._process_payment("credit-card", Decimal("150.00"))
        self._process_payment("paypal", Decimal("89.99"))
        self._process_payment("bank-transfer", Decimal("250.00"))
        self._process_payment("crypto", Decimal("75.50"))

        # 不支援的付款類型
        self._process_payment("carrier-pigeon", Decimal("10.00"))

    @staticmethod
    def _process_payment(payment_type: str, amount: Decimal) -> None:
        try:
            processor = PaymentProcessorFactory.create_processor(payment_type)
            say(f"SUCCESS {payment_type}: {processor.process_payment(amount)}")
        except ValueError as e:
            say(f"ERROR {payment_type}: {e}")
        say()
