# authkeeper/config.py

import os
from pathlib import Path
from dotenv import load_dotenv


load_dotenv()


# -------------------------------
# Storage locations
# -------------------------------

DATA_DIR = Path(os.getenv("AUTHKEEPER_DATA_DIR", "data"))

AUTH_DATABASE_URL = os.getenv("AUTH_DATABASE_URL", f"sqlite:///{DATA_DIR / 'auth.db'}")
STORAGE_DATABASE_URL = os.getenv("STORAGE_DATABASE_URL", f"sqlite:///{DATA_DIR / 'storage.db'}")

# Browser origins allowed to call the backend (comma separated)
UI_ORIGINS = [
    origin.strip()
    for origin in os.getenv("UI_ORIGINS", "http://localhost:8501").split(",")
    if origin.strip()
]

# Key of the session marker in the key-value storage
SESSION_KEY = "user"


# -------------------------------
# Logging
# -------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE")
