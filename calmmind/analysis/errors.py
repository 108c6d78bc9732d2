from typing import Optional


class AnalysisError(Exception):
    """Base for failures surfaced by analysis routes as `{error, message}` bodies."""

    status_code: int = 500
    error_code: str = "api_error"
    default_message: str = "The analysis service failed. Please try again later."

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(AnalysisError):
    error_code = "api_key_missing"
    default_message = "The OpenAI API key is missing. Please provide a valid API key."


class GenerationError(AnalysisError):
    """Any failure of the outbound generation call."""


class AuthError(GenerationError):
    status_code = 401
    error_code = "api_key_invalid"
    default_message = "Invalid API key provided. Please check your OpenAI API key."


class RateLimitError(GenerationError):
    status_code = 429
    error_code = "rate_limit_exceeded"
    default_message = "OpenAI API rate limit exceeded. Please try again later."


class NotFoundError(GenerationError):
    status_code = 404
    error_code = "model_not_found"
    default_message = "The requested OpenAI model was not found. Please check the model configuration."
