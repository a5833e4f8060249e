"""
Transaction Utilities for Lapak Backend
=======================================

Helpers for purchase transactions that rely on row-level locks:

Usage Examples:
    # Context manager: atomic block that gives up waiting for row locks
    with atomic_with_lock_timeout(5000):
        product = Product.objects.select_for_update().get(pk=product_id)

    # Function decorator: re-run the whole transaction when the database
    # picks it as a deadlock victim
    @retry_on_deadlock(max_retries=3)
    def create_purchase(payload):
        ...
"""

import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Optional

from django.db import OperationalError, connections, transaction


logger = logging.getLogger(__name__)

# SQLSTATE codes raised by Postgres
DEADLOCK_DETECTED = "40P01"
LOCK_NOT_AVAILABLE = "55P03"


class TransactionError(Exception):
    """Custom exception for transaction-related errors"""

    pass


class DeadlockError(TransactionError):
    """Exception raised when a deadlock is detected"""

    pass


def _sqlstate(exc: BaseException) -> Optional[str]:
    cause = exc.__cause__
    if cause is None:
        return None
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    return getattr(cause, "pgcode", None) or getattr(cause, "sqlstate", None)


def is_deadlock(exc: BaseException) -> bool:
    """Return True when the database aborted the transaction to break a deadlock."""
    if _sqlstate(exc) == DEADLOCK_DETECTED:
        return True
    message = str(exc)
    return "deadlock detected" in message.lower() or "Deadlock found" in message


def is_lock_timeout(exc: BaseException) -> bool:
    """Return True when a row lock could not be acquired within lock_timeout."""
    if _sqlstate(exc) == LOCK_NOT_AVAILABLE:
        return True
    return "lock timeout" in str(exc).lower()


def set_lock_timeout(timeout_ms: Optional[int], using: str = "default") -> None:
    """
    Bound how long the current transaction waits for row locks.

    Only Postgres supports a per-transaction lock timeout; other backends keep
    their server defaults. Must be called inside an atomic block since
    ``SET LOCAL`` ends with the transaction.
    """
    if not timeout_ms:
        return

    connection = connections[using]
    if connection.vendor != "postgresql":
        return

    with connection.cursor() as cursor:
        cursor.execute(f"SET LOCAL lock_timeout = {int(timeout_ms)}")
    logger.debug(f"Set lock_timeout to {int(timeout_ms)}ms")


@contextmanager
def atomic_with_lock_timeout(timeout_ms: Optional[int] = None, using: str = "default"):
    """
    Context manager for atomic transactions with a bounded row-lock wait.

    Args:
        timeout_ms (int): Milliseconds to wait for a row lock before the
            database raises; None keeps the server default
        using (str): Database alias

    Usage:
        with atomic_with_lock_timeout(5000):
            # Your transaction code here
            Product.objects.select_for_update().get(pk=1)
    """
    with transaction.atomic(using=using):
        set_lock_timeout(timeout_ms, using=using)
        logger.debug(f"Started atomic transaction with lock timeout: {timeout_ms}")
        yield


def retry_on_deadlock(max_retries=3, delay=0.1, backoff=2.0):
    """
    Decorator to retry operations on deadlock with exponential backoff.

    The wrapped function must own the whole transaction: retrying from inside
    an outer atomic block would replay work on an already aborted transaction.

    Args:
        max_retries (int): Maximum number of retry attempts
        delay (float): Initial delay between retries in seconds
        backoff (float): Backoff multiplier for delay
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            current_delay = delay

            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except OperationalError as e:
                    if not is_deadlock(e):
                        raise
                    if attempt >= max_retries:
                        raise DeadlockError(f"Deadlock detected after {max_retries} retries: {e}") from e
                    logger.warning(
                        f"Deadlock detected in {func.__name__}, retrying in {current_delay}s "
                        f"(attempt {attempt + 1}/{max_retries})"
                    )
                    time.sleep(current_delay)
                    current_delay *= backoff

        return wrapper

    return decorator
