"""
Exception types for SkillMatch.

Business-level outcomes such as an unknown requester or an empty roster
are not errors: they yield an empty match list. These exceptions cover
infrastructure failures and invalid directory writes.
"""


class SkillMatchError(Exception):
    """Base class for SkillMatch errors."""


class DirectoryError(SkillMatchError):
    """The user directory backend failed to answer a query."""


class DuplicateUserError(SkillMatchError):
    """A user with the same username or email already exists."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"User with {field} '{value}' already exists")


class UserNotFoundError(SkillMatchError):
    """No user exists with the given id."""

    def __init__(self, user_id: str):
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")
