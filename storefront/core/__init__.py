# storefront/core/__init__.py
"""
Core Domain Layer.

Pure business logic and entities. It follows the Hexagonal Architecture
(Ports & Adapters) pattern:
- No dependencies on frameworks (FastAPI).
- No dependencies on infrastructure (SQL, Redis, FileSystem).
- Defines Interfaces (Ports) that the Infrastructure layer must implement.
"""
