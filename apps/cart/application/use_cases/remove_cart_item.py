"""
Remove cart item use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.entities.cart_store import CartStore
from ..dtos.cart_dto import CartDTO, CartItemRemoveDTO

logger = logging.getLogger(__name__)


@dataclass
class RemoveCartItemUseCase(UseCase[CartItemRemoveDTO, CartDTO]):
    """Use case for removing a product, or one variant of it, from the cart."""

    cart: CartStore

    def execute(self, input_dto: CartItemRemoveDTO) -> UseCaseResult[CartDTO]:
        if not self.cart.remove(input_dto.product_id, input_dto.attributes):
            return UseCaseResult.fail(
                f"No cart line for product '{input_dto.product_id}' with these attributes",
                error_code="CART_LINE_NOT_FOUND",
                data=CartDTO.from_store(self.cart),
            )

        logger.info(f"Removed product '{input_dto.product_id}' from cart '{self.cart.store_key}'")
        return UseCaseResult.ok(CartDTO.from_store(self.cart))
