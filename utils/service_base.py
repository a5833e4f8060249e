"""
Base classes and utilities for the service layer.

This module provides the ServiceResult pattern (inspired by Rust's Result type)
and the BaseService class shared by every Django app in the project.

Guidelines
- Return ServiceResult for expected failures (bad input, missing rows, stock).
- Inside a transaction, raise ServiceError instead: raising out of
  ``transaction.atomic()`` is what rolls the transaction back. Convert it to a
  ServiceResult once the atomic block has been left.
"""

import logging
import time
from dataclasses import dataclass
from functools import wraps
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    A result type that encapsulates success or failure from service operations.

    Attributes:
        ok: True if operation succeeded, False otherwise
        value: The success value (present if ok=True)
        error: Error code (present if ok=False)
        error_detail: Human-readable error message (present if ok=False)

    Examples:
        >>> result = service_ok(purchase_view)
        >>> if result.ok:
        ...     return Response(serializer(result.value).data, 201)
        >>> else:
        ...     return Response({"error": result.error, "message": result.error_detail}, 400)
    """

    ok: bool
    value: Optional[T] = None
    error: Optional[str] = None
    error_detail: Optional[str] = None


def service_ok(value: T = None) -> ServiceResult[T]:
    """
    Create a successful ServiceResult.

    Example:
        >>> return service_ok(purchase)
    """
    return ServiceResult(ok=True, value=value)


def service_err(error: str, error_detail: str = "") -> ServiceResult:
    """
    Create a failed ServiceResult.

    Args:
        error: Error code (e.g., "product_not_found", "insufficient_stock")
        error_detail: Human-readable error message

    Example:
        >>> return service_err("product_not_found", f"Product with ID {id} not found")
    """
    return ServiceResult(ok=False, error=error, error_detail=error_detail or error)


class ServiceError(Exception):
    """
    Expected failure detected inside a transaction.

    Carries the same code/detail pair as a failed ServiceResult so the caller
    can convert it with ``to_result()`` after the rollback.
    """

    def __init__(self, error: str, error_detail: str = ""):
        super().__init__(error_detail or error)
        self.error = error
        self.error_detail = error_detail or error

    def to_result(self) -> ServiceResult:
        return service_err(self.error, self.error_detail)


class BaseService:
    """
    Base class for all services providing common functionality.

    Provides:
    - Logging with class name
    - Performance timing decorator

    Usage:
        class PurchaseService(BaseService):
            @BaseService.log_performance
            def create_purchase(self, payload):
                self.logger.info("Creating purchase")
    """

    def __init__(self):
        """Initialize base service with logger."""
        self.logger = logging.getLogger(self.__class__.__module__ + "." + self.__class__.__name__)

    @staticmethod
    def log_performance(func: Callable) -> Callable:
        """
        Decorator to log performance of service methods.

        Logs execution time and any errors that occur.
        """

        @wraps(func)
        def wrapper(self, *args, **kwargs):
            start_time = time.time()
            method_name = f"{self.__class__.__name__}.{func.__name__}"

            try:
                self.logger.debug(f"{method_name} started")
                result = func(self, *args, **kwargs)
                elapsed_time = (time.time() - start_time) * 1000  # Convert to ms

                if isinstance(result, ServiceResult):
                    if result.ok:
                        self.logger.info(f"{method_name} completed successfully in {elapsed_time:.2f}ms")
                    else:
                        self.logger.warning(
                            f"{method_name} failed with error '{result.error}' in {elapsed_time:.2f}ms"
                        )
                else:
                    self.logger.info(f"{method_name} completed in {elapsed_time:.2f}ms")

                return result

            except Exception as e:
                elapsed_time = (time.time() - start_time) * 1000
                self.logger.error(
                    f"{method_name} raised exception after {elapsed_time:.2f}ms: {str(e)}",
                    exc_info=True,
                )
                raise

        return wrapper
