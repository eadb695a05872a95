"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


# Origins always allowed for local development
DEV_ORIGINS = [
    "http://localhost:5173",  # Vite default
    "http://localhost:3000",
]


def normalize_origin(url: str) -> str:
    """Accept either 'example.com' or 'https://example.com' as a client URL."""
    url = url.strip().rstrip("/")
    if not url or url.startswith(("http://", "https://")):
        return url
    return f"https://{url}"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    app_name: str = "Pokedex API"
    environment: str = "production"
    log_level: str = "INFO"

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "pokedex"
    mongo_server_selection_timeout_ms: int = 5000
    mongo_socket_timeout_ms: int = 10000

    # Redis (rate limit counters)
    redis_host: str = "localhost"
    redis_port: int = 6379

    # Rate Limiting
    rate_limit_enabled: bool = True
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 15 * 60

    # JWT Configuration
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_days: int = 7

    # Frontend
    client_url: str = "http://localhost:5173"

    # PokeAPI catalog
    pokeapi_url: str = "https://pokeapi.co/api/v2"
    pokeapi_timeout_seconds: float = 10.0

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def allowed_origins(self) -> list[str]:
        """Configured client origin plus the local dev origins."""
        origins = [normalize_origin(self.client_url)]
        for origin in DEV_ORIGINS:
            if origin not in origins:
                origins.append(origin)
        return [o for o in origins if o]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
