import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default) in ("1", "true", "True")


class Config:
    SECRET_KEY = (
        os.environ.get("FLASK_SECRET_KEY")
        or os.environ.get("SECRET_KEY")
        or "change-me-locally"
    )
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///dev.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JSON_SORT_KEYS = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Bootstrap: create tables and load the editorial dataset when the store is empty
    CREATE_TABLES_ON_STARTUP = _env_flag("CREATE_TABLES_ON_STARTUP", "0")
    SEED_ON_STARTUP = _env_flag("SEED_ON_STARTUP", "0")

    DISABLE_FORCE_HTTPS = _env_flag("DISABLE_FORCE_HTTPS", "0")

    # JSON-only API: nothing is rendered, so nothing needs to be loaded
    CSP = {
        "default-src": ["'none'"],
        "frame-ancestors": ["'none'"],
    }

    RATELIMIT_ENABLED = True
    RATELIMIT_DEFAULT = os.environ.get("RATELIMIT_DEFAULT", "300 per minute")
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")
    CREATE_TABLES_ON_STARTUP = _env_flag("CREATE_TABLES_ON_STARTUP", "1")
    SEED_ON_STARTUP = _env_flag("SEED_ON_STARTUP", "1")


class ProductionConfig(Config):
    DEBUG = False
    RATELIMIT_STORAGE_URI = os.environ.get(
        "RATELIMIT_STORAGE_URI", "redis://127.0.0.1:6379/0"
    )
    SEED_ON_STARTUP = _env_flag("SEED_ON_STARTUP", "1")


class TestingConfig(Config):
    TESTING = True
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    DISABLE_FORCE_HTTPS = True
    RATELIMIT_ENABLED = False
    RATELIMIT_STORAGE_URI = "memory://"
    CREATE_TABLES_ON_STARTUP = False
    SEED_ON_STARTUP = False


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
