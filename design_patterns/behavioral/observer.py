"""
觀察者模式示範：股價通知與依分類訂閱的新聞發佈。
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, List

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class StockObserver(ABC):
    @abstractmethod
    def update(self, stock: "Stock", old_price: Decimal, new_price: Decimal) -> None: ...


class NewsObserver(ABC):
    @abstractmethod
    def on_news_published(self, category: str, headline: str) -> None: ...


class Stock:
    """可被觀察的股票，價格有顯著變動時通知所有觀察者。"""

    # 小於此變動幅度不通知
    SIGNIFICANT_CHANGE = Decimal("0.01")

    def __init__(self, symbol: str, company_name: str, initial_price: Decimal):
        self.symbol = symbol
        self.company_name = company_name
        self.price = initial_price
        self._observers: List[StockObserver] = []

    def subscribe(self, observer: StockObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)
            say(f"  Observer subscribed to {self.symbol}")

    def unsubscribe(self, observer: StockObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)
            say(f"  Observer unsubscribed from {self.symbol}")

    def notify_observers(self, old_price: Decimal) -> None:
        say(f"Notifying {len(self._observers)} observers about {self.symbol} price change...")
        for observer in list(self._observers):
            try:
                observer.update(self, old_price, self.price)
            except Exception as e:
                say(f"  Error notifying observer: {e}")

    def update_price(self, new_price: Decimal) -> None:
        if abs(new_price - self.price) > self.SIGNIFICANT_CHANGE:
            old_price = self.price
            self.price = new_price
            self.notify_observers(old_price)


class MobileAppNotifier(StockObserver):
    def __init__(self, app_name: str):
        self.app_name = app_name

    def update(self, stock, old_price, new_price):
        change_percent = (new_price - old_price) / old_price * 100
        trend = "UP" if new_price > old_price else "DOWN"
        say(f"  {self.app_name}: {trend} {stock.symbol} ${old_price:.2f} -> ${new_price:.2f} ({change_percent:+.2f}%)")
        if abs(change_percent) > 2:
            say(f"     Push notification sent: {stock.company_name} moved {change_percent:+.1f}%!")


class EmailNotifier(StockObserver):
    def __init__(self, email_address: str):
        self.email_address = email_address

    def update(self, stock, old_price, new_price):
        say(f"  Email to {self.email_address}: {stock.symbol} price alert")
        say(f"     Price changed from ${old_price:.2f} to ${new_price:.2f}")
        if new_price < 150:
            say("     LOW PRICE ALERT: Consider buying opportunity!")
        elif new_price > 160:
            say("     HIGH PRICE ALERT: Consider selling opportunity!")


class TradingBot(StockObserver):
    BUY_THRESHOLD = Decimal("149.00")
    SELL_THRESHOLD = Decimal("160.00")

    def __init__(self, bot_name: str):
        self.bot_name = bot_name

    def update(self, stock, old_price, new_price):
        say(f"  {self.bot_name}: Analyzing {stock.symbol} price movement...")
        if new_price <= self.BUY_THRESHOLD < old_price:
            say(f"     AUTO-BUY: Purchasing {stock.symbol} at ${new_price:.2f}")
        elif old_price < self.SELL_THRESHOLD <= new_price:
            say(f"     AUTO-SELL: Selling {stock.symbol} at ${new_price:.2f}")
        else:
            say(f"     HOLD: Price ${new_price:.2f} within acceptable range")


class TradingDashboard(StockObserver):
    def __init__(self, dashboard_name: str):
        self.dashboard_name = dashboard_name

    def update(self, stock, old_price, new_price):
        change_amount = new_price - old_price
        arrow = "/" if change_amount > 0 else "\\"
        say(f"  {self.dashboard_name}: Updated {stock.symbol} display")
        say(f"     {arrow} ${new_price:.2f} ({change_amount:+.2f})")
        bars = min(10, max(1, int(new_price / 10)))
        say(f"     Chart: {'#' * bars} ${new_price:.2f}")


class NewsAgency:
    """依新聞分類管理訂閱者。"""

    def __init__(self, name: str):
        self.name = name
        self._subscribers: Dict[str, List[NewsObserver]] = {}

    def subscribe(self, observer: NewsObserver, category: str) -> None:
        subscribers = self._subscribers.setdefault(category, [])
        if observer not in subscribers:
            subscribers.append(observer)
            say(f"  Observer subscribed to '{category}' news")

    def unsubscribe(self, observer: NewsObserver, category: str) -> None:
        subscribers = self._subscribers.get(category, [])
        if observer in subscribers:
            subscribers.remove(observer)
            say(f"  Observer unsubscribed from '{category}' news")

    def publish_news(self, category: str, headline: str) -> None:
        say(f"{self.name} publishing: [{category}] {headline}")
        if category not in self._subscribers:
            say(f"  No subscribers for category '{category}'")
            return
        for subscriber in list(self._subscribers[category]):
            try:
                subscriber.on_news_published(category, headline)
            except Exception as e:
                say(f"  Error notifying news subscriber: {e}")


class NewsWebsite(NewsObserver):
    def __init__(self, website_name: str):
        self.website_name = website_name

    def on_news_published(self, category, headline):
        say(f"  {self.website_name}: Published article in {category} section")
        say(f"     Headline: {headline}")


class NewsletterService(NewsObserver):
    def __init__(self, newsletter_name: str):
        self.newsletter_name = newsletter_name

    def on_news_published(self, category, headline):
        say(f"  {self.newsletter_name}: Added to upcoming newsletter")
        say(f"     [{category}] {headline[:50]}...")


class SocialMediaBot(NewsObserver):
    HASHTAGS = {
        "technology": "#tech #innovation #breakthrough",
        "business": "#business #finance #economy",
    }

    def __init__(self, bot_handle: str):
        self.bot_handle = bot_handle

    def on_news_published(self, category, headline):
        say(f"  {self.bot_handle}: Posted to social media")
        hashtags = self.HASHTAGS.get(category.lower(), "#news")
        say(f'     "{headline}" {hashtags}')


class ObserverPatternDemo(PatternDemo):
    name = "Observer"
    description = ("Defines a one-to-many dependency between objects so that when one object changes state, "
                   "all its dependents are notified automatically. Useful for implementing event handling systems, "
                   "model-view architectures, and publish-subscribe patterns.")
    category = PatternCategory.BEHAVIORAL.value

    def demonstrate(self) -> None:
        say("Stock Market Observer Pattern Example")
        say()
        self._demonstrate_stock_price_notifications()
        say()
        self._demonstrate_news_publisher()

    @staticmethod
    def _demonstrate_stock_price_notifications() -> None:
        say("Stock Price Monitoring System:")

        apple_stock = Stock("AAPL", "Apple Inc.", Decimal("150.00"))
        mobile_app = MobileAppNotifier("StockTracker Mobile")
        for observer in (mobile_app,
                         EmailNotifier("alerts@stocktracker.com"),
                         TradingBot("AutoTrader v2.1"),
                         TradingDashboard("Main Dashboard")):
            apple_stock.subscribe(observer)

        say(f"Initial stock price: {apple_stock.symbol} = ${apple_stock.price:.2f}")
        say()

        say("Simulating price changes...")
        apple_stock.update_price(Decimal("155.25"))
        say()
        apple_stock.update_price(Decimal("148.75"))
        say()

        say("Mobile app unsubscribing from notifications...")
        apple_stock.unsubscribe(mobile_app)
        say()
        apple_stock.update_price(Decimal("160.50"))

    @staticmethod
    def _demonstrate_news_publisher() -> None:
        say("\nNews Publisher System:")

        news_agency = NewsAgency("TechNews Central")
        website = NewsWebsite("TechNews.com")
        newsletter = NewsletterService("Weekly Tech Digest")
        social_media = SocialMediaBot("@TechNewsBot")

        news_agency.subscribe(website, "Technology")
        news_agency.subscribe(newsletter, "Technology")
        news_agency.subscribe(social_media, "Technology")
        news_agency.subscribe(website, "Business")

        news_agency.publish_news("Technology", "New breakthrough in quantum computing announced!")
        say()
        news_agency.publish_news("Business", "Tech giants report record quarterly earnings")
        say()

        news_agency.unsubscribe(social_media, "Technology")
        news_agency.publish_news("Technology", "AI model achieves human-level performance in complex reasoning")
