import os
from decimal import Decimal
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoicing.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Invoicing
    DEFAULT_COMPANY_ID = data.get("DEFAULT_COMPANY_ID", 1)
    DEFAULT_TAX_RATE = Decimal(str(data.get("DEFAULT_TAX_RATE", "0.18")))  # Used when a company has no GST rate
    INVOICE_NUMBER_PREFIX = data.get("INVOICE_NUMBER_PREFIX", "INV")
    COMPENSATE_ORPHANED_INVOICES = bool(data.get("COMPENSATE_ORPHANED_INVOICES", True))

    # Documents
    CURRENCY_PREFIX = data.get("CURRENCY_PREFIX", "Rs. ")  # Base-14 PDF fonts have no rupee glyph
    COMPANY_NAME = data.get("COMPANY_NAME", "")
