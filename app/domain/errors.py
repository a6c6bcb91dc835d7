# app/domain/errors.py


class ProductClientError(Exception):
    """Base for every failure raised by ProductClient; str(e) is safe to show to users."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ProductNotFoundError(ProductClientError):
    def __init__(self, product_id: int):
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class ServerError(ProductClientError):
    def __init__(self):
        super().__init__("Server error - please try again later")


class NetworkError(ProductClientError):
    def __init__(self):
        super().__init__("Network error - please check your connection")
