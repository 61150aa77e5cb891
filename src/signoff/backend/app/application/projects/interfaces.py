from typing import Protocol


class TokenGenerator(Protocol):
    def generate(self) -> str:
        """Return a fresh, unguessable capability token."""
        ...
