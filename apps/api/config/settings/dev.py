from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

# 로컬 개발은 sqlite (DB_NAME 지정 시 postgres)
if not os.getenv("DB_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

INSTALLED_APPS += [
    "debug_toolbar",
]

MIDDLEWARE.insert(0, "debug_toolbar.middleware.DebugToolbarMiddleware")

INTERNAL_IPS = [
    "127.0.0.1",
]

LOGGING["loggers"] = {
    "academy": {"level": "DEBUG"},
    "apps.domains.assessments": {"level": "DEBUG"},
}
