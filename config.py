import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key: str, default=None):
    """Environment variable first, then env.yaml, then the default."""
    if key in os.environ:
        value = os.environ[key]
        if isinstance(default, bool):
            return value.strip().lower() in ("1", "true", "yes", "on")
        if isinstance(default, int):
            return int(value)
        if isinstance(default, list):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value
    return data.get(key, default)


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./cms.db")
    AUTO_CREATE_TABLES = bool(_get("AUTO_CREATE_TABLES", True))
    APP_ENV = _get("APP_ENV", "development")
    API_PREFIX = _get("API_PREFIX", "/api")
    API_PORT = _get("API_PORT", 5000)
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get("CORS_ORIGINS", ["http://localhost:3000"])
    CORS_ALLOW_CREDENTIALS = bool(_get("CORS_ALLOW_CREDENTIALS", True))
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    JWT_SECRET = _get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRES_IN = _get("JWT_EXPIRES_IN", "24h")
    JWT_REFRESH_SECRET = _get("JWT_REFRESH_SECRET", "dev-refresh-secret-change-in-production")
    JWT_REFRESH_EXPIRES_IN = _get("JWT_REFRESH_EXPIRES_IN", "7d")
    CLOUDINARY_CLOUD_NAME = _get("CLOUDINARY_CLOUD_NAME", "")
    CLOUDINARY_API_KEY = _get("CLOUDINARY_API_KEY", "")
    CLOUDINARY_API_SECRET = _get("CLOUDINARY_API_SECRET", "")
    GROQ_API_KEY = _get("GROQ_API_KEY", "")
    GROQ_MODEL = _get("GROQ_MODEL", "llama-3.3-70b-versatile")
    GROQ_BASE_URL = _get("GROQ_BASE_URL", "https://api.groq.com/openai/v1")
    OUTBOUND_TIMEOUT_SEC = float(_get("OUTBOUND_TIMEOUT_SEC", "30"))
