import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT carried in the Authorization header or an HTTP-only cookie
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_TOKEN_LOCATION = os.getenv("JWT_TOKEN_LOCATION", "headers,cookies").split(",")
    JWT_COOKIE_SECURE = _env_flag("JWT_COOKIE_SECURE", False)
    JWT_COOKIE_CSRF_PROTECT = True

    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(os.getcwd(), "uploads"))
    UPLOAD_URL_PREFIX = os.getenv("UPLOAD_URL_PREFIX", "/uploads")
    MAX_CONTENT_LENGTH = 50 * 1024 * 1024

    # Bootstrap: create tables and seed the first admin account
    AUTO_INIT_DB = _env_flag("AUTO_INIT_DB", True)
    SEED_ADMIN_USERNAME = os.getenv("SEED_ADMIN_USERNAME", "admin")
    SEED_ADMIN_PASSWORD = os.getenv("SEED_ADMIN_PASSWORD", "admin123")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///lessonpages.sqlite")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")
    JWT_COOKIE_SECURE = _env_flag("JWT_COOKIE_SECURE", True)


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "testing-jwt-secret-key-with-enough-length"
    JWT_COOKIE_CSRF_PROTECT = False
    AUTO_INIT_DB = True


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
