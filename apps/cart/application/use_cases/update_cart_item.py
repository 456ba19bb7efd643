"""
Update cart item use case.
"""
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.entities.cart_store import CartStore
from ..dtos.cart_dto import CartDTO, CartItemUpdateDTO


@dataclass
class UpdateCartItemUseCase(UseCase[CartItemUpdateDTO, CartDTO]):
    """Use case for setting the quantity of an existing cart line."""

    cart: CartStore

    def execute(self, input_dto: CartItemUpdateDTO) -> UseCaseResult[CartDTO]:
        updated = self.cart.update(
            input_dto.product_id,
            input_dto.quantity,
            input_dto.attributes,
        )
        if not updated:
            return UseCaseResult.fail(
                f"No cart line for product '{input_dto.product_id}' with these attributes",
                error_code="CART_LINE_NOT_FOUND",
                data=CartDTO.from_store(self.cart),
            )
        return UseCaseResult.ok(CartDTO.from_store(self.cart))
