"""Maps dashboard exceptions to HTTP responses."""
import logging
from dataclasses import dataclass

from fastapi import HTTPException

from market_dashboard.exceptions import (AuthenticationError,
                                         AuthorizationError, NotFoundError,
                                         StorageUnavailableError,
                                         ValidationError)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceErrorMapper:
    """Maps store/service exceptions to HTTP (status_code, detail).

    One instance per resource so messages read "Stock not found",
    "Failed to fetch currency pairs", and so on.
    """

    resource_name: str = "Resource"
    plural_name: str = "resources"

    def to_http(
        self,
        exc: Exception,
        key: str | None = None,
    ) -> tuple[int, str]:
        """Map an exception to (status_code, detail).

        Args:
            exc: The exception raised by the store or a service check.
            key: Optional identity or natural key to include in the detail.
        """
        if isinstance(exc, NotFoundError):
            if key is not None:
                return (404, f"{self.resource_name} '{key}' not found")
            return (404, f"{self.resource_name} not found")
        if isinstance(exc, ValidationError):
            return (400, str(exc) or "Invalid request")
        if isinstance(exc, AuthenticationError):
            return (401, "Unauthorized")
        if isinstance(exc, AuthorizationError):
            return (403, str(exc) or "Admin access required")
        if isinstance(exc, StorageUnavailableError):
            return (500, f"Failed to access {self.plural_name}")
        return (500, "Internal server error")

    def raise_http(
        self,
        exc: Exception,
        key: str | None = None,
    ) -> None:
        """Map exception to HTTP and raise HTTPException. Never returns."""
        status_code, detail = self.to_http(exc, key=key)
        if status_code >= 500:
            logger.error("%s: %s", detail, exc)
        raise HTTPException(status_code=status_code, detail=detail) from exc
