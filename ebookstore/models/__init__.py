from ebookstore.models.user import User, UserRole
from ebookstore.models.book import Book
from ebookstore.models.order import Order

# add ALL models here
__all__ = ["User", "UserRole", "Book", "Order"]
