"""
Add cart item use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.entities.cart_store import CartStore
from ..dtos.cart_dto import CartDTO, CartItemAddDTO

logger = logging.getLogger(__name__)


@dataclass
class AddCartItemUseCase(UseCase[CartItemAddDTO, CartDTO]):
    """Use case for putting a product variant into the cart."""

    cart: CartStore

    def execute(self, input_dto: CartItemAddDTO) -> UseCaseResult[CartDTO]:
        self.cart.add(
            input_dto.product_id,
            input_dto.quantity,
            input_dto.attributes,
        )
        logger.info(
            f"Added product '{input_dto.product_id}' to cart "
            f"'{self.cart.store_key}' ({self.cart.total_items} lines)"
        )
        return UseCaseResult.ok(CartDTO.from_store(self.cart))
