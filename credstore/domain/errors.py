from __future__ import annotations


class StorageError(Exception):
    """Raised by a user record store when the storage backend fails."""


class UniqueConstraintViolation(StorageError):
    """Raised by a user record store when the username is already taken."""


class DuplicateUsernameError(Exception):
    """Raised when attempting to register a username that is already in use."""


class StorageFailureError(Exception):
    """Raised when the credential store cannot complete an operation due to a storage failure."""


class PasswordPolicyError(Exception):
    """Raised when a password cannot be accepted by the hashing primitive."""
