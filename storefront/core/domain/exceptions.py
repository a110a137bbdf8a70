# storefront/core/domain/exceptions.py
class DomainError(Exception):
    """Base class for all domain-level exceptions."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)

# --- Validation Errors ---

class ValidationError(DomainError):
    """
    Raised when caller-supplied data breaks a business rule.
    The message is client facing and is returned verbatim by the API.
    """

# --- Infrastructure Errors ---

class StorageUnavailableError(DomainError):
    """Raised when the persistence medium cannot be reached or the operation could not complete."""
    def __init__(self, store: str, details: str):
        self.store = store
        super().__init__(f"Storage '{store}' is unavailable: {details}")
