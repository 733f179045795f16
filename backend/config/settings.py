# backend/config/settings.py
"""
Application configuration, loaded once from the environment (and .env).
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./marketplace.db")
SQL_ECHO = _flag("SQL_ECHO")

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-change-me")
TOKEN_EXPIRY_MINUTES = int(os.getenv("TOKEN_EXPIRY_MINUTES", str(7 * 24 * 60)))

FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

DEBUG = _flag("DEBUG")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()
PORT = int(os.getenv("PORT", "8000"))

MAX_PAGE_LIMIT = 50
