"""
Custom exceptions for the profile bot with user-friendly error messages.
"""

class ProfileException(Exception):
    """Base exception for profile-related errors."""
    def __init__(self, message: str, user_message: str = None):
        super().__init__(message)
        self.user_message = user_message or message

class UserNotFoundError(ProfileException):
    """Raised when no stored profile exists for a user id."""
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(
            f"User {user_id} not found",
            f"❌ No profile found for user `{user_id}`."
        )

class InvalidColourError(ProfileException, ValueError):
    """Raised when a hex colour string cannot be parsed."""
    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid hex colour {value!r}",
            f"❌ `{value}` is not a valid hex colour."
        )

class DatabaseError(ProfileException):
    """Raised when database operations fail."""
    def __init__(self, operation: str, details: str = None):
        super().__init__(
            f"Database error during {operation}: {details}",
            "❌ Database error occurred. Please try again later."
        )
