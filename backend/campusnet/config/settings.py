"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    DEBUG = _env_flag("DEBUG")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Key-value store
    # "memory" keeps everything in-process (dev/tests), "redis" is durable
    KV_BACKEND: str = os.getenv("KV_BACKEND", "memory").lower()
    KV_NAMESPACE: str = os.getenv("KV_NAMESPACE", "kv:")
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    REDIS_SCAN_COUNT: int = int(os.getenv("REDIS_SCAN_COUNT", "500"))

    # Auth (identity provider tokens)
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "campus-identity")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "campusnet")

    # Blob storage
    BLOB_BASE = os.getenv("BLOB_BASE", "blobs")
    BLOB_SIGNING_SECRET = os.getenv("BLOB_SIGNING_SECRET", "") or SERVICE_AUTH_SECRET
    PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:5001").rstrip("/")
    SIGNED_URL_TTL: int = int(os.getenv("SIGNED_URL_TTL", "3600"))
    MAX_UPLOAD_MB = float(os.getenv("MAX_UPLOAD_MB", "25"))
    PAPER_CONTENT_TYPE = os.getenv("PAPER_CONTENT_TYPE", "application/pdf")

    # Messaging
    # Clients re-query the inbox at this interval, there is no push channel
    INBOX_POLL_SECONDS: int = int(os.getenv("INBOX_POLL_SECONDS", "10"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    KV_BACKEND = "memory"


class ProductionConfig(Config):
    """Production configuration"""

    DEBUG = False
    # Durable unless KV_BACKEND says otherwise
    KV_BACKEND = os.getenv("KV_BACKEND", "redis").lower()


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
