# storefront/adapters/__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the Ports defined in `storefront.core.ports`:
- `api`: The Primary Adapter (Driving) - FastAPI web server.
- `persistence`: Secondary Adapters (Driven) - SQL, CSV and in-memory repositories.
- `cache`: Secondary Adapter (Driven) - Redis / in-memory response cache.

Dependencies point INWARD. These modules depend on `storefront.core`,
but `storefront.core` never imports from here.
"""
