from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 로컬에서 Postgres 없이 띄울 때
if os.getenv("DB_ENGINE", "") == "sqlite":
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }
