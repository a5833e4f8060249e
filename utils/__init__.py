# Utils package for Lapak backend

from .logging_utils import mask_value
from .transaction_utils import (
    DeadlockError,
    TransactionError,
    atomic_with_lock_timeout,
    is_deadlock,
    is_lock_timeout,
    retry_on_deadlock,
    set_lock_timeout,
)


__all__ = [
    "mask_value",
    "DeadlockError",
    "TransactionError",
    "atomic_with_lock_timeout",
    "is_deadlock",
    "is_lock_timeout",
    "retry_on_deadlock",
    "set_lock_timeout",
]
