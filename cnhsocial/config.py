# cnhsocial/config.py
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

SERVICE_NAME = "CNH Social Backend"
VERSION = "2.0.0"

DEBUG = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
ENVIRONMENT = os.getenv("ENVIRONMENT", "production")
PLATFORM = os.getenv("PLATFORM", "Railway")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

# Site de produção + ambientes locais do front
DEFAULT_ORIGINS: List[str] = [
    "https://gov-resgate.com",
    "https://www.gov-resgate.com",
    "http://localhost:3000",
    "http://localhost:8080",
    "http://127.0.0.1:5500",
    "http://127.0.0.1:3000",
]

# CORS_ORIGINS: lista separada por vírgulas, somada às origens padrão
_raw_origins = os.getenv("CORS_ORIGINS", "").strip()
EXTRA_ORIGINS: List[str] = [o.strip() for o in _raw_origins.split(",") if o.strip()]
ALLOW_ORIGINS: List[str] = list(dict.fromkeys(DEFAULT_ORIGINS + EXTRA_ORIGINS))  # remove duplicates preserving order

ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOW_HEADERS = ["Content-Type", "Authorization", "X-Requested-With"]

ENDPOINTS = {
    "root": "/",
    "health": "/health",
    "status": "/status",
    "test": "/test",
    "aureolink": "/aureolink/create",
    "funnel": "/funnel-data",
}
