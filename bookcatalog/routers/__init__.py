"""
API Routers Package

Router Structure:
- authors.py: /api/v1/authors/* endpoints
- books.py: /api/v1/books/* endpoints

Each router is imported and registered in main.py.
"""

from bookcatalog.routers.authors import router as authors_router
from bookcatalog.routers.books import router as books_router

__all__ = [
    "authors_router",
    "books_router",
]
