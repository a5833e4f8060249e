from .catalog import Product
from .category import Category
from .file import StoredFile


__all__ = [
    "Category",
    "Product",
    "StoredFile",
]
