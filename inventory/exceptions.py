"""
Error taxonomy shared by the services and the HTTP layer.

Services raise these exceptions; the handlers registered in
``inventory.main`` turn them into ``{"error": message}`` responses
with the status code declared on each class.
"""


class InventoryError(Exception):
    """Base class for errors that are reported to the API caller."""
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(InventoryError):
    """Missing or invalid input."""
    status_code = 400
    default_message = "Invalid request"


class ConflictError(InventoryError):
    """Uniqueness or referential-integrity violation."""
    status_code = 400
    default_message = "Conflict with existing data"


class NotFoundError(InventoryError):
    """The requested record does not exist."""
    status_code = 404
    default_message = "Not found"


class AuthenticationError(InventoryError):
    """No valid session for a protected endpoint."""
    status_code = 401
    default_message = "Authentication required"


class InvalidCredentialsError(InventoryError):
    """Login failed. The message never says which part was wrong."""
    status_code = 401
    default_message = "Invalid username or password"


class UnexpectedError(InventoryError):
    """Database or session store failure."""
    status_code = 500
