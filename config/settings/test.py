"""
Test settings.
"""
from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret-key"
DEBUG = False
ALLOWED_HOSTS = ['testserver', 'shop.example.com', 'other.example.com']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

# Keeps API tests free of database access.
SESSION_ENGINE = 'django.contrib.sessions.backends.signed_cookies'

CART = {
    'cart_max_item': 0,
    'item_max_quantity': 200000,
    'use_cookie': False,
}
