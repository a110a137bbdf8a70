# storefront/__init__.py
"""
Storefront - Orders & Products sample service.

This package hosts two small bounded contexts behind one FastAPI process:
- Orders: Hexagonal layout (Ports & Adapters).
- Products: Layered layout (Domain validator, Application use cases).
"""

__version__ = "1.0.0"
