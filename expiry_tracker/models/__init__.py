from .user import User
from .product import Product
