# storefront/core/domain/__init__.py
"""
Domain Entities and Value Objects.

Defines the immutable records (Order, Product) and the business rules
that guard their creation.
"""
