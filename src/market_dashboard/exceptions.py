"""Error taxonomy shared by the store, services and routers."""


class DashboardError(Exception):
    """Base class for market dashboard errors."""


class StorageUnavailableError(DashboardError):
    """The persistence backend cannot be reached or rejected a write unexpectedly."""


class NotFoundError(DashboardError):
    """Requested identity or natural key is absent."""


class ValidationError(DashboardError):
    """Malformed caller input. Raised before the store is touched."""


class AuthenticationError(DashboardError):
    """No resolvable caller identity."""


class AuthorizationError(DashboardError):
    """Caller lacks the required role."""
