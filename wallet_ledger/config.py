import os
from dotenv import load_dotenv
from sqlalchemy.pool import StaticPool

load_dotenv()

class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY")

    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///wallet_ledger.db")

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 10))
    DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", 10))
    # enforced by postgres itself, so a stuck query releases its connection
    DB_STATEMENT_TIMEOUT_MS = int(os.getenv("DB_STATEMENT_TIMEOUT_MS", 5000))

    HISTORY_DEFAULT_LIMIT = int(os.getenv("HISTORY_DEFAULT_LIMIT", 20))
    HISTORY_MAX_LIMIT = int(os.getenv("HISTORY_MAX_LIMIT", 100))

    @classmethod
    def engine_options(cls, uri):
        if not uri.startswith("postgresql"):
            return {}
        return {
            "pool_pre_ping": True,
            "pool_size": cls.DB_POOL_SIZE,
            "pool_timeout": cls.DB_POOL_TIMEOUT,
            "connect_args": {
                "options": f"-c statement_timeout={cls.DB_STATEMENT_TIMEOUT_MS}"
            },
        }

class DevelopmentConfig(Config):
    DEBUG = True

class ProductionConfig(Config):
    DEBUG = False

class TestingConfig(Config):
    TESTING = True
    JWT_SECRET_KEY = "test-secret-key-with-enough-length-for-hs256"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    LOG_LEVEL = "DEBUG"

    @classmethod
    def engine_options(cls, uri):
        # one shared in-memory database for the whole app
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }

CONFIGS = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
