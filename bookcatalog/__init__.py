"""
Book Catalog Application Package

A FastAPI backend for authors and books, where every book keeps an ordered
list of its authors.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session management, conflict translation
- exceptions.py: Domain errors and their HTTP status
- main.py: FastAPI application factory and exception handlers
- dependencies.py: Dependency injection aliases
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Validation rules, author order handling, author/book operations
"""

__version__ = "0.1.0"
