# barberapp/config.py

import os
import warnings
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Hosted database (Postgres in production, SQLite file for local runs)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./barber.db")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"

SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    warnings.warn(
        "SECRET_KEY not set! Using insecure default - DO NOT USE IN PRODUCTION", RuntimeWarning, stacklevel=2
    )
    SECRET_KEY = "change-me-later"
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))

# Single barber account. ADMIN_PASSWORD_HASH (bcrypt) wins over ADMIN_PASSWORD.
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "barbeiro")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "123456")
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH")

# Push webhook for new bookings (WirePusher style GET endpoint). Empty disables it.
NOTIFICATION_URL = os.getenv("NOTIFICATION_URL", "")
NOTIFICATION_TITLE = os.getenv("NOTIFICATION_TITLE", "Novo Agendamento - BarberApp")
NOTIFICATION_TIMEOUT = float(os.getenv("NOTIFICATION_TIMEOUT", "10"))

POPUP_DELAY_SECONDS = int(os.getenv("POPUP_DELAY_SECONDS", "2"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
