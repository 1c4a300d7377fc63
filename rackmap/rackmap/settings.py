"""
Django settings for the rackmap project.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get('DJANGO_SECRET_KEY', 'rackmap-insecure-dev-key')

DEBUG = os.environ.get('DJANGO_DEBUG', '1') == '1'

ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'bin_layout',
]

# The layout engine has no models; the default database only keeps
# Django's test runner happy.
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': BASE_DIR / 'db.sqlite3',
    }
}

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

USE_TZ = True
TIME_ZONE = 'Europe/Warsaw'

BIN_LAYOUT = {
    'TABLE_PAGE_SIZE': int(os.environ.get('BIN_LAYOUT_TABLE_PAGE_SIZE', 25)),
    'RACK_DISPLAY_LIMIT': int(os.environ.get('BIN_LAYOUT_RACK_DISPLAY_LIMIT', 5)),
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '{levelname} {name}: {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'bin_layout': {
            'handlers': ['console'],
            'level': os.environ.get('BIN_LAYOUT_LOG_LEVEL', 'INFO'),
        },
    },
}
