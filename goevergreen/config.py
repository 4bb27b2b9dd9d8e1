from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # Site
    domain: str = "goevergreen.shop"
    contact_email: str = "info@goevergreen.shop"
    site_name: str = "GoEvergreen"
    environment: str = "production"

    # Upstream WordPress.com origin
    wordpress_base_url: str = "https://goevergreen9.wordpress.com"
    fetch_timeout_seconds: float = 12.0
    fetch_max_attempts: int = 2
    fetch_backoff_seconds: float = 0.5
    proxy_user_agent: str = "GoEvergreen-Proxy/1.0"

    # Static assets are served from an external image host
    logo_url: str = "https://via.placeholder.com/200x200/7a9b8e/ffffff?text=GoEvergreen"
    favicon_url: str = "https://via.placeholder.com/32x32/7a9b8e/ffffff?text=GE"

    # Database Settings
    database_url: Optional[str] = None
    db_pool_min_size: int = 1
    db_pool_max_size: int = 10

    # Analytics
    analytics_retention_days: int = 90
    analytics_summary_days: int = 7

    @property
    def site_url(self) -> str:
        return f"https://{self.domain}"

    @property
    def upstream_host(self) -> str:
        return self.wordpress_base_url.split("://", 1)[-1].rstrip("/")

    class Config:
        env_file = ".env"
        extra = "ignore"  # This line allows extra env vars without errors

settings = Settings()
