"""Builder: assemble a UserProfile step by step, validating on build()."""
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class UserProfile:
    username: str
    email: str
    display_name: Optional[str] = None
    age: Optional[int] = None
    interests: List[str] = field(default_factory=list)


class UserProfileBuilder:
    """Fluent builder; username and email are required."""

    def __init__(self):
        self._username: Optional[str] = None
        self._email: Optional[str] = None
        self._display_name: Optional[str] = None
        self._age: Optional[int] = None
        self._interests: List[str] = []

    def username(self, value: str) -> "UserProfileBuilder":
        self._username = value
        return self

    def email(self, value: str) -> "UserProfileBuilder":
        self._email = value
        return self

    def display_name(self, value: str) -> "UserProfileBuilder":
        self._display_name = value
        return self

    def age(self, value: int) -> "UserProfileBuilder":
        self._age = value
        return self

    def add_interest(self, value: str) -> "UserProfileBuilder":
        self._interests.append(value)
        return self

    def build(self) -> UserProfile:
        if not self._username:
            raise ValueError("username is required")
        if not self._email:
            raise ValueError("email is required")
        return UserProfile(
            username=self._username,
            email=self._email,
            display_name=self._display_name or self._username,
            age=self._age,
            interests=list(self._interests),
        )


def demo() -> List[str]:
    profile = (UserProfileBuilder()
               .username("ada")
               .email("ada@example.com")
               .add_interest("engines")
               .build())
    lines = [f"built: {profile.username} <{profile.email}> interests={profile.interests}"]
    try:
        UserProfileBuilder().username("nobody").build()
    except ValueError as e:
        lines.append(f"rejected: {e}")
    return lines
