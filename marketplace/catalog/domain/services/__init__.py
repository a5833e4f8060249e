from .category_service import CategoryNameResolver
from .file_service import FileInfo, FileService


__all__ = [
    "CategoryNameResolver",
    "FileInfo",
    "FileService",
]
