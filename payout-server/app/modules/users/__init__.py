"""User domain models and exceptions.

Services live in ``app.modules.users.service``; they are not re-exported here
because the SQL repositories import these models.
"""

from .exceptions import UserAlreadyExistsError, UserNotFoundError
from .models import ROLE_EMPLOYEE, ROLE_MANAGER, UserAccount, UserCreateInput

__all__ = [
    "ROLE_EMPLOYEE",
    "ROLE_MANAGER",
    "UserAccount",
    "UserCreateInput",
    "UserAlreadyExistsError",
    "UserNotFoundError",
]
