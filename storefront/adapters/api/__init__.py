# storefront/adapters/api/__init__.py
"""
HTTP boundary (FastAPI).

Decodes requests, invokes Use Cases and translates their outcomes into
status codes. This is the only layer that knows about HTTP.
"""
