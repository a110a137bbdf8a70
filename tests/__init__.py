# tests/__init__.py
"""
Test Suite for storefront.

Organization:
- `core`: Use cases and domain models with mocked ports.
- `adapters`: Repositories, caches and HTTP endpoints against tmp files, SQLite and TestClient.
- `shared`: Settings validation.
"""
