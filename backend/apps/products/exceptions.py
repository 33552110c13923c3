from typing import Any, Mapping, Optional

from rest_framework import status

from apps.api.exceptions import ApplicationError


class ProductValidationError(ApplicationError):
    """Business-rule violation on a product payload.

    Carries either a field -> message mapping (``errors``) or, for
    single-rule failures, just a message.
    """

    def __init__(self, message: str, errors: Optional[Mapping[str, str]] = None):
        self.errors = dict(errors or {})
        super().__init__(
            "VALIDATION_ERROR",
            message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=dict(self.errors) if self.errors else None,
        )


class ProductNotFoundError(ApplicationError):
    def __init__(self, product_id: Any):
        self.product_id = product_id
        super().__init__(
            "PRODUCT_NOT_FOUND",
            f"Producto no encontrado con ID: {product_id}",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"id": str(product_id)},
        )
