# Account payload schemas shared by the routes and the client session.

from .schemas import UserCreate, UserLogin, UserUpdate, PasswordReset, error_list

__all__ = ["UserCreate", "UserLogin", "UserUpdate", "PasswordReset", "error_list"]
