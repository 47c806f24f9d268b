"""User domain specific exceptions."""

from app.core.errors import NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when the requested account cannot be found."""

    def __init__(self, user_id: str | None = None) -> None:
        super().__init__("User not found")
        self.user_id = user_id


class UserAlreadyExistsError(ValidationError):
    """Raised when attempting to register an email twice."""

    def __init__(self, email: str) -> None:
        super().__init__("Email already exists")
        self.email = email
