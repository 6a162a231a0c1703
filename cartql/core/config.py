"""CartQL Service Configuration"""

from functools import lru_cache

from pydantic_settings import BaseSettings

from ..data.currencies import CurrencyCode


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "CartQL"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True

    # Cart behaviour
    default_currency: CurrencyCode = CurrencyCode.USD
    abandoned_after_hours: float = 2.0
    orders_list_limit: int = 50

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        env_prefix = "CARTQL_"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
