"""
Warehouse Errors
================
Every failure raised by the warehouse API derives from WarehouseError.
Each one also subclasses the matching builtin (ValueError, LookupError,
TypeError) so callers that only know the builtins still catch them.
"""


class WarehouseError(Exception):
    pass


class DuplicateProductError(WarehouseError, ValueError):
    """add_product() was given an id that is already stored."""

    def __init__(self, product_id=None):
        super().__init__("Product with that id already exists, use updateProduct for updates.")
        self.product_id = product_id


class ProductNotFoundError(WarehouseError, LookupError):
    """update_product_price() was given an id that is not stored."""

    def __init__(self, product_id=None):
        super().__init__("Product with that id doesn't exist.")
        self.product_id = product_id


class UnsupportedMutationError(WarehouseError, TypeError):
    """A caller tried to modify a read-only product listing."""

    def __init__(self, operation: str):
        super().__init__(f"Product listing is read-only; '{operation}' is not supported.")
        self.operation = operation


class InvalidCategoryError(WarehouseError, ValueError):
    pass


class InvalidProductError(WarehouseError, ValueError):
    """Strict validation rejected a product field."""

    def __init__(self, message: str, field: str):
        super().__init__(message)
        self.field = field
