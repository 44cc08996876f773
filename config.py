import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")
DB_ISOLATION_LEVEL = os.getenv("DB_ISOLATION_LEVEL") or None

# "reject" refuses a decrement below zero, "backorder" lets stock go negative
STOCK_POLICY = os.getenv("STOCK_POLICY", "reject").lower()

LOG_FILE = os.getenv("LOG_FILE", "Logs/app.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
