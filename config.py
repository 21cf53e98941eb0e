"""
config.py
---------
Central configuration module. Loads all environment variables
from the .env file and exposes them as typed constants.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ── PostgreSQL ────────────────────────────────────────────
DB_HOST: str = os.getenv("DB_HOST", "localhost")
DB_PORT: int = int(os.getenv("DB_PORT", "5432"))
DB_NAME: str = os.getenv("DB_NAME", "activerecord")
DB_USER: str = os.getenv("DB_USER", "activerecord_user")
DB_PASS: str = os.getenv("DB_PASS", "")

DATABASE_URL: str = os.getenv(
    "DATABASE_URL",
    f"postgresql://{DB_USER}:{DB_PASS}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

# ── Connection Pool ───────────────────────────────────────
DB_POOL_MIN: int = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX: int = int(os.getenv("DB_POOL_MAX", "5"))

# ── Naming Conventions ────────────────────────────────────
# Type names are built as namespace + short name + postfix.
DAO_NAMESPACE: str = os.getenv("DAO_NAMESPACE", "")
DAO_POSTFIX: str = os.getenv("DAO_POSTFIX", "Dao")
MODEL_NAMESPACE: str = os.getenv("MODEL_NAMESPACE", "")
MODEL_POSTFIX: str = os.getenv("MODEL_POSTFIX", "")

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
