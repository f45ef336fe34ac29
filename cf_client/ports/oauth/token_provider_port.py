from abc import ABC, abstractmethod


class TokenProviderPort(ABC):
    @abstractmethod
    def token(self) -> str:
        """Return a value for the Authorization header, e.g. "bearer <token>"."""
        raise NotImplementedError
