import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration - shared across all environments"""

    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JSON_SORT_KEYS = False

    BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    STORAGE_ROOT = os.getenv(
        "SHOPDESK_STORAGE_ROOT",
        str(Path(__file__).resolve().parents[1] / "shopdesk-storage"))
    LOGS_DIR = os.getenv("SHOPDESK_LOGS_DIR", os.path.join(BASE_DIR, 'logs'))

    # Thermal receipts
    RECEIPT_PAPER_WIDTH = os.environ.get('RECEIPT_PAPER_WIDTH', '80mm')
    RECEIPT_CURRENCY_SYMBOL = os.environ.get('RECEIPT_CURRENCY_SYMBOL', '₹')
    # e.g. "lp -d receipt -o raw"; the spooled file path is appended
    RECEIPT_PRINT_COMMAND = os.environ.get('RECEIPT_PRINT_COMMAND')
    RECEIPT_PRINT_TIMEOUT = float(os.environ.get('RECEIPT_PRINT_TIMEOUT', '10'))
    RECEIPT_SETTLE_SECONDS = float(os.environ.get('RECEIPT_SETTLE_SECONDS', '1.0'))
    RECEIPT_SPOOL_DIR = os.getenv('RECEIPT_SPOOL_DIR', os.path.join(STORAGE_ROOT, 'spool'))
    RECEIPT_DEFAULT_FOOTER = os.environ.get('RECEIPT_DEFAULT_FOOTER', 'Thank you for shopping with us!')
    RECEIPT_DEFAULT_TERMS = os.environ.get('RECEIPT_DEFAULT_TERMS')

    CORS_ORIGINS = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]


class DevConfig(Config):
    """Development configuration"""
    DEBUG = True
    FLASK_HOST = '0.0.0.0'
    FLASK_PORT = 5000

    DB_PATH = os.path.join(Config.STORAGE_ROOT, 'database', 'shopdesk.db')
    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI', f"sqlite:///{DB_PATH}")


class TestConfig(Config):
    """Test configuration - in-memory database, no print delay"""
    TESTING = True
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    RECEIPT_PRINT_COMMAND = None
    RECEIPT_SETTLE_SECONDS = 0.0
    RECEIPT_DEFAULT_FOOTER = 'Thank you'
    RECEIPT_DEFAULT_TERMS = None


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    FLASK_HOST = '::'
    FLASK_PORT = 5000

    # Production database - MUST be set via environment
    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI')
