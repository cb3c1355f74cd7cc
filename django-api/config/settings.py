"""Django settings for the Homies events service.

Values are read from the environment; a `.env` file next to manage.py is
loaded first when present.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


SECRET_KEY = os.getenv("HOMIES_SECRET_KEY", "django-insecure-homies-dev-key")

DEBUG = _env_bool("HOMIES_DEBUG")

ALLOWED_HOSTS: list[str] = []

INSTALLED_APPS = [
    "homies.apps.HomiesConfig",
]

DATABASES = {
    "default": {
        "ENGINE": os.getenv("HOMIES_DB_ENGINE", "django.db.backends.sqlite3"),
        "NAME": os.getenv("HOMIES_DB_NAME", str(BASE_DIR / "homies.sqlite3")),
        "USER": os.getenv("HOMIES_DB_USER", ""),
        "PASSWORD": os.getenv("HOMIES_DB_PASSWORD", ""),
        "HOST": os.getenv("HOMIES_DB_HOST", ""),
        "PORT": os.getenv("HOMIES_DB_PORT", ""),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "homies": {
            "handlers": ["console"],
            "level": os.getenv("HOMIES_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
