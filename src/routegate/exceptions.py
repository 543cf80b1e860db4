"""Custom exceptions for RouteGate."""


class RouteGateError(Exception):
    """Base exception for RouteGate."""

    pass


class ConfigurationError(RouteGateError):
    """Exception raised for startup configuration errors."""

    pass


class RouteStoreError(RouteGateError):
    """Exception raised when the external route store cannot be queried."""

    pass


class GatewayError(RouteGateError):
    """Exception carrying a caller-visible error message and HTTP status."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UnauthorizedError(GatewayError):
    """Missing or mismatching master token."""

    status_code = 401


class InvalidPathError(GatewayError):
    """Request path does not carry a route key."""

    status_code = 400


class InvalidBodyError(GatewayError):
    """Request body is not acceptable for the selected adapter."""

    status_code = 400


class RouteNotFoundError(GatewayError):
    """No route configuration exists for the route key."""

    status_code = 404


class GatewayConfigurationError(GatewayError):
    """A resolved route cannot be served because of gateway misconfiguration."""

    status_code = 500


class UnsupportedServiceTypeError(GatewayError):
    """Route declares a service type with no registered adapter."""

    status_code = 501


class ForwardError(GatewayError):
    """Downstream service or event bus was unreachable or rejected the call."""

    status_code = 502
