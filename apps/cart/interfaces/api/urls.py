"""
Cart API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.cart.interfaces.api.v1.urls')),
]
