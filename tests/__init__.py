"""
Test Suite for the Book Catalog API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_authors.py: Tests for /api/v1/authors endpoints
- test_books.py: Tests for /api/v1/books endpoints
- test_services.py: Service functions called directly
- test_validation.py, test_author_order.py: Pure helpers
- test_app.py, test_config.py, test_seed_data.py: Application wiring

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_books.py

    # Run specific test
    pytest tests/test_books.py::TestCreateBook::test_create_book_minimal

    # Run with verbose output
    pytest -v
"""
