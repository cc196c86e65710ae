"""
轉接器模式示範：以共同介面整合第三方付款閘道與不同格式的資料來源。
"""
import csv
import io
import json
import random
import uuid
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


@dataclass
class PaymentRequest:
    amount: Decimal
    currency: str = "USD"
    customer_email: str = ""
    description: str = ""


@dataclass
class PaymentResult:
    is_success: bool
    transaction_id: str
    message: str


class PaymentProcessor(ABC):
    """應用程式期望的付款處理介面。"""

    @abstractmethod
    def process_payment(self, request: PaymentRequest) -> PaymentResult: ...

    @abstractmethod
    def validate_payment(self, request: PaymentRequest) -> bool: ...


class DataSource(ABC):
    """應用程式期望的資料來源介面。"""

    @abstractmethod
    def get_data(self, query: str) -> List[str]: ...


# 第三方服務，介面彼此不相容

class StripePaymentGateway:
    def create_charge(self, amount_in_cents: int, currency: str, customer_email: str) -> Dict[str, object]:
        return {"id": f"ch_{uuid.uuid4().hex}"[:24], "status": "succeeded", "amount": amount_in_cents}


class PayPalAPI:
    def execute_payment(self, payment_info: Dict[str, object]) -> Dict[str, str]:
        return {
            "transaction_id": f"PAY-{random.randint(10000000, 99999999)}",
            "state": "approved",
            "total": f"{payment_info['total_amount']:.2f}",
        }


class SquareProcessor:
    def process_square_payment(self, amount_money: Dict[str, object], buyer_email_address: str) -> Dict[str, object]:
        return {"payment_id": str(uuid.uuid4()), "status": "COMPLETED", "amount_money": amount_money}


class XmlDataSource:
    def get_xml_data(self, entity_name: str) -> str:
        return f"<{entity_name}><item>John Doe</item><item>Jane Smith</item></{entity_name}>"


class JsonDataSource:
    def retrieve_json_data(self, table: str) -> str:
        return '{"data": [{"name": "Alice Johnson"}, {"name": "Bob Wilson"}]}'


class CsvDataSource:
    def get_csv_content(self, data_set: str) -> str:
        return "name\nCharlie Brown\nDiana Prince"


# 轉接器

def _to_cents(amount: Decimal) -> int:
    return int(amount * 100)


class StripePaymentAdapter(PaymentProcessor):
    def __init__(self, gateway: StripePaymentGateway):
        self._gateway = gateway

    def process_payment(self, request):
        result = self._gateway.create_charge(
            amount_in_cents=_to_cents(request.amount),
            currency=request.currency.lower(),
            customer_email=request.customer_email,
        )
        return PaymentResult(
            is_success=result["status"] == "succeeded",
            transaction_id=result["id"],
            message=f"Stripe payment {result['status']}",
        )

    def validate_payment(self, request):
        return request.amount > 0 and bool(request.customer_email)


class PayPalPaymentAdapter(PaymentProcessor):
    def __init__(self, api: PayPalAPI):
        self._api = api

    def process_payment(self, request):
        result = self._api.execute_payment({
            "total_amount": request.amount,
            "currency_code": request.currency,
            "payer_email": request.customer_email,
        })
        return PaymentResult(
            is_success=result["state"] == "approved",
            transaction_id=result["transaction_id"],
            message=f"PayPal payment {result['state']} for ${result['total']}",
        )

    def validate_payment(self, request):
        return request.amount > 0 and "@" in request.customer_email


class SquarePaymentAdapter(PaymentProcessor):
    def __init__(self, processor: SquareProcessor):
        self._processor = processor

    def process_payment(self, request):
        result = self._processor.process_square_payment(
            amount_money={"amount": _to_cents(request.amount), "currency": request.currency},
            buyer_email_address=request.customer_email,
        )
        return PaymentResult(
            is_success=result["status"] == "COMPLETED",
            transaction_id=result["payment_id"],
            message=f"Square payment {result['status']}",
        )

    def validate_payment(self, request):
        # Square 有最低金額限制
        return request.amount >= 1


class XmlDataAdapter(DataSource):
    def __init__(self, source: XmlDataSource):
        self._source = source

    def get_data(self, query):
        root = ET.fromstring(self._source.get_xml_data(query))
        return [f"{item.text} (from XML)" for item in root.iter("item")]


class JsonDataAdapter(DataSource):
    def __init__(self, source: JsonDataSource):
        self._source = source

    def get_data(self, query):
        payload = json.loads(self._source.retrieve_json_data(query))
        return [f"{row['name']} (from JSON)" for row in payload["data"]]


class CsvDataAdapter(DataSource):
    def __init__(self, source: CsvDataSource):
        self._source = source

    def get_data(self, query):
        reader = csv.DictReader(io.StringIO(self._source.get_csv_content(query)))
        return [f"{row['name']} (from CSV)" for row in reader]


class AdapterPatternDemo(PatternDemo):
    name = "Adapter"
    description = ("Allows incompatible interfaces to work together. "
                   "Useful when integrating with third-party libraries or legacy systems "
                   "that have different interfaces than what your application expects.")
    category = PatternCategory.STRUCTURAL.value

    def demonstrate(self) -> None:
        say("Payment Gateway Adapter Example")
        say()

        say("Processing payments through different gateways:")
        processors: List[PaymentProcessor] = [
            StripePaymentAdapter(StripePaymentGateway()),
            PayPalPaymentAdapter(PayPalAPI()),
            SquarePaymentAdapter(SquareProcessor()),
        ]
        request = PaymentRequest(
            amount=Decimal("99.99"),
            currency="USD",
            customer_email="customer@example.com",
            description="Test payment",
        )
        for processor in processors:
            processor_name = type(processor).__name__
            try:
                result = processor.process_payment(request)
                say(f"  OK {processor_name}: {result.message}")
                say(f"     Transaction ID: {result.transaction_id}")
            except Exception as e:
                say(f"  FAILED {processor_name}: {e}")
            say()

        say("Data Source Adapter Example:")
        sources: List[DataSource] = [
            XmlDataAdapter(XmlDataSource()),
            JsonDataAdapter(JsonDataSource()),
            CsvDataAdapter(CsvDataSource()),
        ]
        for source in sources:
            data = source.get_data("users")
            say(f"  {type(source).__name__}: Retrieved {len(data)} records")
            for record in data[:2]:
                say(f"     - {record}")
            say()
