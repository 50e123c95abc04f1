"""
Services Package

This package contains the catalog's business logic, kept separate from HTTP
handling so it can be called and tested without a request:
- validation.py: pure input rules shared by author and book operations
- author_order.py: conversion between ordered author id lists and
  BookAuthor rows
- authors.py: author create/update/read and the books-by-author query
- books.py: book create/update/read, including author list replacement

Services raise bookcatalog.exceptions errors and own the transaction of the
operation they perform (commit on success, rollback on storage errors).
"""
