"""
建造者模式示範：逐步建立資料庫連線設定。
"""
from dataclasses import dataclass

from design_patterns.pattern_demo import PatternCategory, PatternDemo, say


@dataclass(frozen=True)
class DatabaseConfiguration:
    """由建造者產生的資料庫設定。"""
    connection_string: str = ""
    timeout_seconds: int = 30
    logging_enabled: bool = False
    connection_pooling_enabled: bool = False
    pool_size: int = 10
    retry_logic_enabled: bool = False
    max_retries: int = 0
    command_timeout_seconds: int = 30

    def __str__(self) -> str:
        pooling = f"Enabled (Size: {self.pool_size})" if self.connection_pooling_enabled else "Disabled"
        retry = f"Enabled (Max: {self.max_retries})" if self.retry_logic_enabled else "Disabled"
        lines = [
            f"  Connection: {self.connection_string}",
            f"  Timeout: {self.timeout_seconds}s",
            f"  Logging: {'Enabled' if self.logging_enabled else 'Disabled'}",
            f"  Connection Pooling: {pooling}",
            f"  Retry Logic: {retry}",
            f"  Command Timeout: {self.command_timeout_seconds}s",
        ]
        return "\n".join(lines)


class DatabaseConfigurationBuilder:
    """
    逐步建立 DatabaseConfiguration。

    同時提供傳統的 set_* 方法與較具表達力的 for_server/with_* 流式方法，
    每個方法都返回 self 以便串接。
    """

    def __init__(self):
        self.reset()

    @classmethod
    def create_new(cls) -> "DatabaseConfigurationBuilder":
        return cls()

    def reset(self) -> "DatabaseConfigurationBuilder":
        self._connection_string = ""
        self._timeout_seconds = 30
        self._logging_enabled = False
        self._connection_pooling_enabled = False
        self._pool_size = 10
        self._retry_logic_enabled = False
        self._max_retries = 0
        self._command_timeout_seconds = 30
        return self

    def set_connection_string(self, connection_string: str) -> "DatabaseConfigurationBuilder":
        self._connection_string = connection_string
        return self

    def set_timeout(self, seconds: int) -> "DatabaseConfigurationBuilder":
        self._timeout_seconds = seconds
        return self

    def enable_logging(self) -> "DatabaseConfigurationBuilder":
        self._logging_enabled = True
        return self

    def enable_connection_pooling(self) -> "DatabaseConfigurationBuilder":
        self._connection_pooling_enabled = True
        return self

    def set_pool_size(self, size: int) -> "DatabaseConfigurationBuilder":
        # 設定連線池大小時一併啟用連線池
        self._pool_size = size
        self._connection_pooling_enabled = True
        return self

    def enable_retry_logic(self, max_retries: int) -> "DatabaseConfigurationBuilder":
        self._retry_logic_enabled = True
        self._max_retries = max_retries
        return self

    def set_command_timeout(self, seconds: int) -> "DatabaseConfigurationBuilder":
        self._command_timeout_seconds = seconds
        return self

    def for_server(self, server: str) -> "DatabaseConfigurationBuilder":
        self._connection_string = f"Server={server};"
        return self

    def with_database(self, database: str) -> "DatabaseConfigurationBuilder":
        self._connection_string += f"Database={database};"
        return self

    def with_encryption(self) -> "DatabaseConfigurationBuilder":
        self._connection_string += "Encrypt=true;"
        return self

    def with_timeout(self, seconds: int) -> "DatabaseConfigurationBuilder":
        return self.set_timeout(seconds)

    def with_connection_pooling(self, pool_size: int = 10) -> "DatabaseConfigurationBuilder":
        self._connection_pooling_enabled = True
        self._pool_size = pool_size
        return self

    def with_retry_logic(self, max_retries: int) -> "DatabaseConfigurationBuilder":
        return self.enable_retry_logic(max_retries)

    def with_logging(self) -> "DatabaseConfigurationBuilder":
        return self.enable_logging()

    def build(self) -> DatabaseConfiguration:
        return DatabaseConfiguration(
            connection_string=self._connection_string,
            timeout_seconds=self._timeout_seconds,
            logging_enabled=self._logging_enabled,
            connection_pooling_enabled=self._connection_pooling_enabled,
            pool_size=self._pool_size,
            retry_logic_enabled=self._retry_logic_enabled,
            max_retries=self._max_retries,
            command_timeout_seconds=self._command_timeout_seconds,
        )


class BuilderPatternDemo(PatternDemo):
    name = "Builder"
    description = ("Constructs complex objects step by step. "
                   "Useful when creating objects with many optional parameters "
                   "or when the construction process should allow different representations.")
    category = PatternCategory.CREATIONAL.value

    def demonstrate(self) -> None:
        say("Database Configuration Builder Example")
        say()

        say("Development Database Configuration:")
        dev_config = (DatabaseConfigurationBuilder()
                      .set_connection_string("Server=localhost;Database=DevDB;")
                      .set_timeout(30)
                      .enable_logging()
                      .set_pool_size(10)
                      .build())
        say(str(dev_config))
        say()

        say("Production Database Configuration:")
        prod_config = (DatabaseConfigurationBuilder()
                       .set_connection_string("Server=prod-server;Database=ProdDB;Encrypt=true;")
                       .set_timeout(60)
                       .enable_connection_pooling()
                       .set_pool_size(100)
                       .enable_retry_logic(max_retries=3)
                       .set_command_timeout(120)
                       .build())
        say(str(prod_config))
        say()

        say("Custom Database Configuration:")
        custom_config = (DatabaseConfigurationBuilder()
                         .set_connection_string("Server=custom-server;Database=CustomDB;")
                         .set_timeout(45)
                         .enable_logging()
                         .enable_connection_pooling()
                         .set_pool_size(50)
                         .enable_retry_logic(max_retries=5)
                         .set_command_timeout(90)
                         .build())
        say(str(custom_config))
        say()

        say("Fluent Builder with Method Chaining:")
        fluent_config = (DatabaseConfigurationBuilder.create_new()
                         .for_server("fluent-server")
                         .with_database("FluentDB")
                         .with_encryption()
                         .with_timeout(75)
                         .with_connection_pooling(pool_size=25)
                         .with_retry_logic(max_retries=2)
                         .with_logging()
                         .build())
        say(str(fluent_config))
