"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # App settings
    APP_ENV = os.getenv("APP_ENV", "development")
    DEBUG = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes", "on"}
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5000"))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # Redis settings (document store)
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    REDIS_SOCKET_TIMEOUT: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "5.0"))
    REDIS_KEY_PREFIX: str = os.getenv("REDIS_KEY_PREFIX", "chat")

    # Presence
    # A participant whose last heartbeat is older than the TTL is evicted
    # by the next sweep.
    PRESENCE_TTL_SECONDS: float = float(os.getenv("PRESENCE_TTL_SECONDS", "10"))
    SWEEP_INTERVAL_SECONDS: float = float(os.getenv("SWEEP_INTERVAL_SECONDS", "15"))
    SWEEPER_ENABLED = os.getenv("SWEEPER_ENABLED", "true").lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    # Status notices (join / leave)
    ANNOUNCE_RETRY_ATTEMPTS: int = int(os.getenv("ANNOUNCE_RETRY_ATTEMPTS", "3"))
    ANNOUNCE_RETRY_WAIT_SECONDS: float = float(
        os.getenv("ANNOUNCE_RETRY_WAIT_SECONDS", "0.5")
    )
    JOIN_NOTICE_TEXT = os.getenv("JOIN_NOTICE_TEXT", "entra na sala...")
    LEAVE_NOTICE_TEXT = os.getenv("LEAVE_NOTICE_TEXT", "sai da sala...")

    # Messages
    MAX_TEXT_LENGTH: int = int(os.getenv("MAX_TEXT_LENGTH", "2000"))
    MAX_NAME_LENGTH: int = int(os.getenv("MAX_NAME_LENGTH", "64"))


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    SWEEPER_ENABLED = False
    ANNOUNCE_RETRY_WAIT_SECONDS = 0.0


class ProductionConfig(Config):
    """Production configuration"""

    pass


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
