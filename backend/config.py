import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    health_rate_limit: str = "60/minute"

    # Chat engine
    max_recommendations: int = 3
    max_message_length: int | None = None  # optional cap on user_message content
    skill_catalog_path: str = ""  # YAML file; empty means the built-in catalog

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
