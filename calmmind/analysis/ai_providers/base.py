from abc import ABC, abstractmethod

from pydantic import BaseModel


class GenerationResult(BaseModel):
    """Opaque model output; no structure is guaranteed."""
    raw_text: str


class GenerationClient(ABC):
    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """False when no credential is available and every call would fail."""

    @abstractmethod
    def generate(self, prompt: str) -> GenerationResult:
        """
        Sends one prompt to the remote model.

        Raises:
            AuthError, RateLimitError, NotFoundError: mapped upstream statuses.
            GenerationError: any other failure.
        """
