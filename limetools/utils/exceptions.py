"""Custom exceptions for the Lime Tools console"""


class LimeToolsError(Exception):
    """Base exception for Lime Tools"""
    pass


class ConfigError(LimeToolsError):
    """Configuration error"""
    pass


class StoreError(LimeToolsError):
    """The backing user file could not be written"""
    pass


class UserStoreError(LimeToolsError):
    """Roster business-rule violation"""
    pass


class DuplicateEmailError(UserStoreError):
    """A user with this email already exists"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User '{email}' already exists")


class UserNotFoundError(UserStoreError):
    """No user matches the given email"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User '{email}' not found")
