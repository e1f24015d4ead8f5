import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

# No default: a missing API_BASE_URL must stop the app at startup.
API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", ""),
    "token": os.getenv("API_TOKEN"),
    "timeout": float(os.getenv("API_TIMEOUT", "15")),
    "page_limit": int(os.getenv("PAGE_LIMIT", "10")),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
