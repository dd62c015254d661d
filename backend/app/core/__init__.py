from .config import settings
from .errors import ConflictError, NotFoundError, ServiceError, ValidationError

__all__ = [
    "settings",
    "ConflictError",
    "NotFoundError",
    "ServiceError",
    "ValidationError",
]
