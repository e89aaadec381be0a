"""Failure classes raised by the generation pipeline.

Each error carries the HTTP status the handler answers with. Errors marked
``public`` are shown to the caller as-is; the rest are logged and replaced
with a generic message.
"""

GENERIC_ERROR_MESSAGE = "Internal Server Error"


class PodcastError(Exception):
    status = 500
    public = False

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def user_message(self) -> str:
        if self.public:
            return self.message
        return GENERIC_ERROR_MESSAGE


class ConfigurationError(PodcastError):
    """Missing or unusable provider credentials."""
    status = 500
    public = True


class InputError(PodcastError):
    """Neither topics nor a blog URL was supplied."""
    status = 400
    public = True


class ArticleFetchError(PodcastError):
    """The blog URL was rejected, could not be fetched, or could not be read."""
    status = 422
    public = True

    @property
    def user_message(self) -> str:
        return f"Could not process blog URL: {self.message}"


class ProviderError(PodcastError):
    """The text-generation provider failed or returned nothing usable."""


class SynthesisError(PodcastError):
    """The speech provider failed or returned no audio."""
