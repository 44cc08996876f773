# Import every model so Base.metadata knows all tables and foreign keys.
from db.models.author import Author
from db.models.category import Category
from db.models.book import Book
from db.models.customer import Customer
from db.models.order import Order, OrderItem

__all__ = ["Author", "Category", "Book", "Customer", "Order", "OrderItem"]
