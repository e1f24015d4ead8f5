import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://localhost:3000/api"),
    "token": os.getenv("API_TOKEN"),
    "timeout": float(os.getenv("API_TIMEOUT", "15")),
    "page_limit": int(os.getenv("PAGE_LIMIT", "10")),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
