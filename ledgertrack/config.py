import os
from decimal import Decimal, InvalidOperation


def _class_digits():
    """Read LEDGER_CLASS_DIGITS; only the 1-digit and 2-digit conventions exist."""
    raw = os.environ.get("LEDGER_CLASS_DIGITS", "1")
    try:
        digits = int(raw)
    except ValueError:
        raise ValueError(f"LEDGER_CLASS_DIGITS must be 1 or 2, got {raw!r}")
    if digits not in (1, 2):
        raise ValueError(f"LEDGER_CLASS_DIGITS must be 1 or 2, got {digits}")
    return digits


def parse_tolerance(raw):
    """Balance-sheet tolerance as a finite, non-negative Decimal."""
    try:
        tolerance = Decimal(str(raw).strip())
    except InvalidOperation:
        raise ValueError(f"BALANCE_TOLERANCE must be a decimal amount, got {raw!r}")
    if not tolerance.is_finite() or tolerance < 0:
        raise ValueError(f"BALANCE_TOLERANCE must be a non-negative amount, got {raw!r}")
    return tolerance


class BaseConfig:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret")
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///ledgertrack.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    WTF_CSRF_TIME_LIMIT = None
    SESSION_COOKIE_SAMESITE = "Lax"
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # OHADA chart of accounts: class is the leading digit of the account code
    LEDGER_CLASS_DIGITS = _class_digits()
    LEDGER_CURRENCY = os.environ.get("LEDGER_CURRENCY", "XAF")
    BALANCE_TOLERANCE = parse_tolerance(os.environ.get("BALANCE_TOLERANCE", "0.01"))

    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_HEADERS_ENABLED = True
    EXPORT_RATE_LIMIT = os.environ.get("EXPORT_RATE_LIMIT", "30/minute")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SESSION_COOKIE_SECURE = False


class ProductionConfig(BaseConfig):
    DEBUG = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False


def get_config(name=None):
    if name is None:
        name = os.environ.get("FLASK_ENV", "development").lower()
    if name.startswith("prod"):
        return ProductionConfig
    if name.startswith("test"):
        return TestingConfig
    return DevelopmentConfig
