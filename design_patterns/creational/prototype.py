"""
原型模式示範：複製文件範本而非從頭建立。
"""
import copy
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


@dataclass
class DocumentMetadata:
    author: str = ""
    version: str = "1.0"
    tags: List[str] = field(default_factory=list)


@dataclass
class CompanyInfo:
    name: str = ""
    address: str = ""
    tax_id: str = ""


@dataclass
class ChartSettings:
    chart_type: str = "Bar"
    show_legend: bool = True
    colors: List[str] = field(default_factory=list)


@dataclass
class DocumentTemplate:
    """所有文件範本的原型，clone() 產生完整的深層複本。"""
    title: str = ""
    created_date: Optional[datetime] = None
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)

    def clone(self) -> "DocumentTemplate":
        return copy.deepcopy(self)


@dataclass
class InvoiceTemplate(DocumentTemplate):
    company_info: CompanyInfo = field(default_factory=CompanyInfo)
    tax_rate: Decimal = Decimal("0.1")


@dataclass
class ReportTemplate(DocumentTemplate):
    report_type: str = ""
    chart_settings: ChartSettings = field(default_factory=ChartSettings)


def create_invoice_template() -> InvoiceTemplate:
    return InvoiceTemplate(
        title="Standard Invoice Template",
        created_date=datetime.now(),
        metadata=DocumentMetadata(author="Finance Department", version="1.0",
                                  tags=["invoice", "billing", "finance"]),
        company_info=CompanyInfo(name="Acme Corporation", address="123 Business St", tax_id="TAX123456"),
    )


def create_report_template() -> ReportTemplate:
    return ReportTemplate(
        title="Monthly Report Template",
        created_date=datetime.now(),
        metadata=DocumentMetadata(author="Analytics Team", version="2.1",
                                  tags=["report", "analytics", "monthly"]),
        report_type="Financial Summary",
        chart_settings=ChartSettings(chart_type="Bar", show_legend=True,
                                     colors=["#FF6B6B", "#4ECDC4", "#45B7D1"]),
    )


class PrototypePatternDemo(PatternDemo):
    name = "Prototype"
    description = ("Creates objects by cloning existing instances. "
                   "Useful when object creation is expensive or when you need "
                   "to create objects with similar state to existing ones.")
    category = PatternCategory.CREATIONAL.value

    def demonstrate(self) -> None:
        say("Document Template Prototype Example")
        say()

        original_invoice = create_invoice_template()
        original_report = create_report_template()

        say("Original Templates Created:")
        say(f"Invoice: {original_invoice.title}")
        say(f"Report: {original_report.title}")
        say()

        self._demonstrate_invoice_cloning(original_invoice)
        say()
        self._demonstrate_report_cloning(original_report)
        say()
        self._demonstrate_deep_cloning()

    @staticmethod
    def _demonstrate_invoice_cloning(original: DocumentTemplate) -> None:
        say("Creating Custom Invoices from Template:")

        customer_a = original.clone()
        customer_a.title = "Invoice for Customer A"
        customer_a.metadata.tags.append("customer-a")

        customer_b = original.clone()
        customer_b.title = "Invoice for Customer B"
        customer_b.metadata.tags.append("customer-b")

        say(f"  {customer_a.title} - Tags: [{', '.join(customer_a.metadata.tags)}]")
        say(f"  {customer_b.title} - Tags: [{', '.join(customer_b.metadata.tags)}]")
        say(f"  Original template unchanged: {original.title}")

    @staticmethod
    def _demonstrate_report_cloning(original: DocumentTemplate) -> None:
        say("Creating Custom Reports from Template:")

        quarterly = original.clone()
        quarterly.title = "Q1 Financial Report"
        quarterly.metadata.version = "2.2"
        if isinstance(quarterly, ReportTemplate):
            quarterly.report_type = "Quarterly Summary"
            quarterly.chart_settings.chart_type = "Line"

        annual = original.clone()
        annual.title = "Annual Performance Report"

        say(f"  {quarterly.title} - Version: {quarterly.metadata.version}")
        say(f"  {annual.title} - Version: {annual.metadata.version}")

    @staticmethod
    def _demonstrate_deep_cloning() -> None:
        say("Deep vs Shallow Cloning Demonstration:")

        original = InvoiceTemplate(
            title="Original Invoice",
            metadata=DocumentMetadata(author="John Doe"),
            company_info=CompanyInfo(name="Original Company"),
        )

        clone = original.clone()
        clone.title = "Deep Clone Invoice"
        clone.metadata.author = "Jane Smith"
        clone.company_info.name = "Clone Company"

        say(f"  Original: {original.title} | Author: {original.metadata.author} | Company: {original.company_info.name}")
        say(f"  Clone: {clone.title} | Author: {clone.metadata.author} | Company: {clone.company_info.name}")
        say("  Deep cloning preserved original object integrity!")
