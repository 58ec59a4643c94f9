from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. The counter itself never raises them; they come
    from the layers that turn caller input into counters.
    """


class ValidationError(UserError):
    """Raised when user input cannot be normalized into a counter."""
