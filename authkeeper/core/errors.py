# authkeeper/core/errors.py


class AuthError(Exception):
    """Base class for every failure the authentication layer reports to the UI."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AuthError):
    default_message = "Please fill in the required fields"


class UnknownUser(AuthError):
    default_message = "Username does not exist!"


class InvalidCredentials(AuthError):
    default_message = "Incorrect password"


class DuplicateUsername(AuthError):
    default_message = "Username already exists."


class StoreError(AuthError):
    default_message = "Local storage is unavailable"
