# models/errors.py
# Exceptions raised by the cart core. The console app catches CartError
# and reports the message; nothing here is fatal to the process.


class CartError(Exception):
    pass


class InvalidItemError(CartError, ValueError):
    # field is one of "name", "unit_price", "quantity"
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class InvalidIndexError(CartError, IndexError):
    def __init__(self, index: int, size: int):
        super().__init__(f"Invalid item index {index}: the cart has {size} item(s).")
        self.index = index
        self.size = size


class EmptyCartError(CartError):
    pass


class CartStorageError(CartError):
    pass


class CorruptCartError(CartStorageError):
    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.line = line
