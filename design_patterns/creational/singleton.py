"""
單例模式示範：延遲建立、加鎖建立，以及以明確的設定物件取代全域單例。
"""
import threading
from datetime import datetime
from typing import Dict, Optional

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


class BasicLogger:
    """最簡單的延遲建立單例，未考慮執行緒安全。"""

    _instance: Optional["BasicLogger"] = None

    def __init__(self):
        say("  BasicLogger instance created")

    @classmethod
    def instance(cls) -> "BasicLogger":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def log(self, message: str) -> None:
        say(f"  [{datetime.now():%H:%M:%S}] {message}")


class ThreadSafeDatabase:
    """以雙重檢查鎖定建立的單例。"""

    _instance: Optional["ThreadSafeDatabase"] = None
    _lock = threading.Lock()

    def __init__(self):
        say("  ThreadSafeDatabase instance created")
        self.connection_count = 1

    @classmethod
    def instance(cls) -> "ThreadSafeDatabase":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def execute_query(self, query: str) -> None:
        say(f"  Executing: {query}")
        self.connection_count += 1


class ModernCache:
    """透過 __new__ 保證只有一個實例的快取。"""

    _instance: Optional["ModernCache"] = None

    def __new__(cls):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._cache = {}
            say("  ModernCache instance created (lazy initialization)")
            cls._instance = instance
        return cls._instance

    def __len__(self) -> int:
        return len(self._cache)

    def set(self, key: str, value: str) -> None:
        self._cache[key] = value
        say(f"  Cached: {key} = {value}")

    def get(self, key: str) -> Optional[str]:
        return self._cache.get(key)


class ConfigurationManager:
    """
    應用程式設定的內容物件。

    不使用全域實例：由擁有者建立一次，再以參照傳給需要的元件。
    """

    def __init__(self):
        say("  ConfigurationManager instance created")
        self._configurations: Dict[str, str] = {
            "AppName": "Design Patterns Demo",
            "Version": "1.0.0",
            "Environment": "Development",
        }

    @property
    def configuration_count(self) -> int:
        return len(self._configurations)

    def set_value(self, key: str, value: str) -> None:
        self._configurations[key] = value

    def get_value(self, key: str, default: str = "") -> str:
        return self._configurations.get(key, default)

    def has_value(self, key: str) -> bool:
        return key in self._configurations


class ApiClient:
    """透過建構函數取得共用設定的元件。"""

    def __init__(self, config: ConfigurationManager):
        self.config = config

    def describe(self) -> str:
        return f"timeout={self.config.get_value('ApiTimeout', '?')}s"


class SingletonPatternDemo(PatternDemo):
    name = "Singleton"
    description = ("Ensures a class has only one instance and provides global access to it. "
                   "Useful for logging, configuration, database connections, and other resources "
                   "that should have only one instance throughout the application lifecycle.")
    category = PatternCategory.CREATIONAL.value

    def demonstrate(self) -> None:
        say("Singleton Pattern Demonstration")
        say()

        say("Basic Singleton (Not Thread-Safe):")
        logger1 = BasicLogger.instance()
        logger2 = BasicLogger.instance()
        logger1.log("First message from logger1")
        logger2.log("Second message from logger2")
        say(f"  Same instance? {logger1 is logger2}")
        say(f"  Instance ids: {id(logger1)} == {id(logger2)}")
        say()

        say("Thread-Safe Singleton:")
        database1 = ThreadSafeDatabase.instance()
        database2 = ThreadSafeDatabase.instance()
        database1.execute_query("SELECT * FROM Users")
        database2.execute_query("UPDATE Users SET Status = 'Active'")
        say(f"  Same instance? {database1 is database2}")
        say(f"  Connection count: {database1.connection_count}")
        say()

        say("Lazy Singleton (__new__ Approach):")
        cache1 = ModernCache()
        cache2 = ModernCache()
        cache1.set("user:123", "John Doe")
        say(f"  Retrieved from cache: {cache2.get('user:123')}")
        say(f"  Same instance? {cache1 is cache2}")
        say(f"  Cache size: {len(cache1)}")
        say()

        say("Practical Example - Configuration Context Object:")
        config = ConfigurationManager()
        config.set_value("DatabaseConnectionString", "Server=localhost;Database=MyApp;")
        config.set_value("ApiTimeout", "30")
        config.set_value("EnableLogging", "true")

        client = ApiClient(config)
        shared = client.config
        say(f"  Database Connection: {shared.get_value('DatabaseConnectionString')}")
        say(f"  API Timeout: {shared.get_value('ApiTimeout')} seconds")
        say(f"  Logging Enabled: {shared.get_value('EnableLogging')}")
        say(f"  Same context object? {shared is config} ({client.describe()})")
        say(f"  Total config items: {config.configuration_count}")
