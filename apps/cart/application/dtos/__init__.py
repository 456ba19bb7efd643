# DTOs
from .cart_dto import (
    CartItemAddDTO,
    CartItemUpdateDTO,
    CartItemRemoveDTO,
    CartLineDTO,
    CartDTO,
)

__all__ = [
    'CartItemAddDTO',
    'CartItemUpdateDTO',
    'CartItemRemoveDTO',
    'CartLineDTO',
    'CartDTO',
]
