import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _from_env(key: str, default=None):
    """env.yaml wins; secrets may also come from the process environment"""
    if key in data:
        return data[key]
    return os.environ.get(key, default)


def _as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value)


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./vidshare.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Sessions
    SESSION_SECRET = _from_env("SESSION_SECRET")
    SESSION_TTL_DAYS = data.get("SESSION_TTL_DAYS", 30)
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "vidshare_session")
    SESSION_COOKIE_SECURE = bool(data.get("SESSION_COOKIE_SECURE", False))
    ADMIN_EMAILS = _as_list(_from_env("ADMIN_EMAILS"))

    # Credentials
    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 10)
    PASSWORD_MIN_LENGTH = data.get("PASSWORD_MIN_LENGTH", 6)
    RESET_TOKEN_TTL_MINUTES = data.get("RESET_TOKEN_TTL_MINUTES", 10)
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")

    # Outbound mail (password reset links)
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = data.get("SMTP_PORT", 587)
    SMTP_USER = _from_env("SMTP_USER", "")
    SMTP_PASSWORD = _from_env("SMTP_PASSWORD", "")
    SMTP_FROM = data.get("SMTP_FROM", "no-reply@vidshare.local")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))

    # Media host upload signing
    MEDIA_PUBLIC_KEY = _from_env("MEDIA_PUBLIC_KEY", "")
    MEDIA_PRIVATE_KEY = _from_env("MEDIA_PRIVATE_KEY", "")
    MEDIA_URL_ENDPOINT = data.get("MEDIA_URL_ENDPOINT", "")
    MEDIA_UPLOAD_TOKEN_TTL_SECONDS = data.get("MEDIA_UPLOAD_TOKEN_TTL_SECONDS", 1800)
