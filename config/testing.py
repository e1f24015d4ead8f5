import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("API_BASE_URL", "http://backend.test/api"),
    "token": "test-token",
    "timeout": 5,
    "page_limit": 10,
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
