"""
Cart module configuration.
Session/cookie scoped shopping cart store.
"""
from django.apps import AppConfig


class CartConfig(AppConfig):
    name = 'apps.cart'
    verbose_name = 'Cart'
