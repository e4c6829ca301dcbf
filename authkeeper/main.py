# authkeeper/main.py

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from authkeeper.api import auth
from authkeeper.config import LOG_FILE, LOG_LEVEL, UI_ORIGINS
from authkeeper.database import init_db
from authkeeper.logging_config import setup_logging


setup_logging(LOG_LEVEL, LOG_FILE)
init_db()

app = FastAPI(title="authkeeper")

app.add_middleware(
    CORSMiddleware,
    allow_origins=UI_ORIGINS,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)

app.include_router(auth.router)
