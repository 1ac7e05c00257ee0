"""Django settings for the Protocol Zero site.

Values come from the environment; defaults suit local development and tests.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def env_bool(name: str, default: bool = False) -> bool:
    return os.environ.get(name, str(default)).lower() in ("1", "true", "yes")


SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-only-secret-key")
DEBUG = env_bool("DJANGO_DEBUG", True)
ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "signups.apps.SignupsConfig",
    "shop.apps.ShopConfig",
    "clips.apps.ClipsConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"

# Bounds every signup write: the in-flight guard TTL and the sqlite lock wait.
WRITE_TIMEOUT = int(os.environ.get("SIGNUPS_WRITE_TIMEOUT", "10"))

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
        "OPTIONS": {"timeout": WRITE_TIMEOUT},
    }
}

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "protocol-zero",
    }
}

SESSION_ENGINE = "django.contrib.sessions.backends.db"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-ca"
TIME_ZONE = os.environ.get("VENUE_TIME_ZONE", "America/Toronto")
USE_I18N = True
USE_TZ = True

STATIC_URL = "static/"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "EXCEPTION_HANDLER": "common.exceptions.domain_exception_handler",
}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "common": {"handlers": ["console"], "level": LOG_LEVEL},
        "signups": {"handlers": ["console"], "level": LOG_LEVEL},
        "shop": {"handlers": ["console"], "level": LOG_LEVEL},
        "clips": {"handlers": ["console"], "level": LOG_LEVEL},
    },
}

# Feature blocks

SIGNUPS = {
    "STORE": "signups.stores.django_store.DjangoSignupStore",
    "WRITE_TIMEOUT": WRITE_TIMEOUT,
    "COUNT_CACHE_TIMEOUT": 60,
    "SIGN_IN_URL": "/api/auth/login/",
}

SHOP = {
    "PRODUCT_STORE": "shop.stores.django_store.DjangoProductStore",
    "STORE_EMAIL": os.environ.get("SHOP_STORE_EMAIL", "orders@protocolzeroairsoft.ca"),
    "PICKUP_LOCATION": os.environ.get("SHOP_PICKUP_LOCATION", "Protocol Zero front desk"),
    "SECURITY_QUESTION": os.environ.get("SHOP_SECURITY_QUESTION", "Favourite game mode?"),
    "SECURITY_ANSWER": os.environ.get("SHOP_SECURITY_ANSWER", "speedsoft"),
}

CLIPS = {
    "STORE": "clips.stores.django_store.DjangoClipStore",
    "DEFAULT_AVATAR": "/logos/logo-icon.png",
}
