from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserRecord:
    username: str
    password_hash: str = field(repr=False)
    salt: str = field(repr=False)


@dataclass(frozen=True)
class AuthCredentials:
    username: str
    password: str = field(repr=False)
