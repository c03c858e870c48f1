"""
Centralized application configuration
"""
import json
from typing import Any, Dict, List, Optional

from pydantic_settings import BaseSettings


# Display-only trend annotations for the dashboard stats cards.
# Not computed from historical data; override with STATS_TRENDS.
DEFAULT_STATS_TRENDS: Dict[str, Dict[str, Any]] = {
    "revenue": {"change": 12.5, "trend": "up"},
    "customers": {"change": 8.2, "trend": "up"},
    "orders": {"change": -3.1, "trend": "down"},
    "satisfaction": {"change": 2.4, "trend": "up"},
}


class Settings(BaseSettings):
    """Application settings"""

    # API Settings
    API_TITLE: str = "CRM Dashboard API"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Authentication and data API for the CRM dashboard"
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Database
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "crm_dashboard"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = ""
    DB_CONNECT_TIMEOUT: int = 10
    DB_POOL_MIN: int = 1
    DB_POOL_MAX: int = 10

    # CORS - comma-separated string or JSON array
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "*"

    # Static dashboard assets (HTML pages); skipped if the directory is missing
    STATIC_DIR: str = "public"

    # "md5" matches the digests already stored in users.password_hash.
    # "bcrypt" requires the table to hold bcrypt hashes.
    PASSWORD_HASH_SCHEME: str = "md5"

    STATS_TRENDS: Dict[str, Dict[str, Any]] = DEFAULT_STATS_TRENDS

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["*"]

        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    def get_dsn_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for psycopg2.connect / the connection pool"""
        return {
            "host": self.DB_HOST,
            "port": self.DB_PORT,
            "dbname": self.DB_NAME,
            "user": self.DB_USER,
            "password": self.DB_PASSWORD,
            "connect_timeout": self.DB_CONNECT_TIMEOUT,
        }

    def get_trend(self, metric: str) -> Dict[str, Any]:
        """Placeholder change/trend annotation for a stats metric"""
        trend = self.STATS_TRENDS.get(metric) or DEFAULT_STATS_TRENDS.get(metric, {})
        return {
            "change": trend.get("change", 0),
            "trend": trend.get("trend", "up"),
        }

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
