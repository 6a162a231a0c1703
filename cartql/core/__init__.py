# Core modules

from .config import Settings, get_settings
from .errors import CartQLError, NotFoundError, ValidationError, ConflictError

__all__ = [
    "Settings",
    "get_settings",
    "CartQLError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
]
