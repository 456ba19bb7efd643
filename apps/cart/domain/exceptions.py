"""
Cart domain exceptions.
"""
from shared.domain.exceptions import DomainException, EntityNotFoundError


class CartLineNotFoundError(EntityNotFoundError):
    """Raised when no cart line matches a product id and attribute set."""

    def __init__(self, product_id: str):
        super().__init__(
            entity_name="Cart line",
            entity_id=product_id,
            code="CART_LINE_NOT_FOUND",
        )
        self.product_id = product_id


class MalformedCartBlobError(DomainException):
    """Raised when a persisted cart blob cannot be decoded."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Persisted cart blob is malformed: {reason}",
            code="MALFORMED_CART_BLOB",
        )
        self.reason = reason
