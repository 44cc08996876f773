class OrderError(Exception):
    """Base class for failures raised by the order engine."""


class OrderNotFoundError(OrderError):
    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")


class BookNotFoundError(OrderError):
    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book {book_id} not found")


class InsufficientStockError(OrderError):
    def __init__(self, book_id: int, available: int, requested: int):
        self.book_id = book_id
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient stock for book {book_id}: available {available}, requested {requested}"
        )
