"""Domain layer public API.

Import domain types from here rather than from blog.domain.models directly.
This keeps the internal module structure free to change without breaking callers.
"""

from blog.domain.exceptions import (
    BadRequestAlertException,
    BlogError,
    PersistenceError,
    PersistenceTransientError,
    PersistenceValidationError,
)
from blog.domain.models import (
    MAX_ID,
    Comment,
    Order,
    Page,
    Pageable,
    Principal,
    StoryRef,
    UserRef,
)

__all__ = [
    # Models
    "MAX_ID",
    "Comment",
    "Order",
    "Page",
    "Pageable",
    "Principal",
    "StoryRef",
    "UserRef",
    # Exceptions
    "BlogError",
    "BadRequestAlertException",
    "PersistenceError",
    "PersistenceTransientError",
    "PersistenceValidationError",
]
