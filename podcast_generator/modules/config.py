import os
from dataclasses import dataclass

from podcast_generator.modules.errors import ConfigurationError

DEFAULT_MODEL = "gemini-2.0-flash"
DEFAULT_OUTPUT_DIR = "public"
DEFAULT_FETCH_TIMEOUT = 10.0

# Hard cut applied to extracted article text before summarizing.
MAX_ARTICLE_CHARS = 8000


def _read_timeout(value) -> float:
    if not value:
        return DEFAULT_FETCH_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigurationError(
            f"PODCAST_FETCH_TIMEOUT must be a number of seconds, got {value!r}."
        )
    if not timeout > 0:
        raise ConfigurationError(
            f"PODCAST_FETCH_TIMEOUT must be greater than zero, got {value!r}."
        )
    return timeout


@dataclass(frozen=True)
class PodcastConfig:
    """Settings for one running server, read once from the environment.

    Missing credentials do not stop a config from being built; they are
    checked by :meth:`validate` when a request comes in. A malformed
    PODCAST_FETCH_TIMEOUT is rejected here.
    """

    gemini_api_key: str = ""
    google_credentials: str = ""
    model: str = DEFAULT_MODEL
    output_dir: str = DEFAULT_OUTPUT_DIR
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT

    @classmethod
    def from_env(cls, environ=None) -> "PodcastConfig":
        env = os.environ if environ is None else environ
        output_dir = env.get("PODCAST_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR
        timeout = _read_timeout(env.get("PODCAST_FETCH_TIMEOUT"))
        return cls(
            gemini_api_key=env.get("GEMINI_API_KEY", ""),
            google_credentials=env.get("GOOGLE_APPLICATION_CREDENTIALS", ""),
            model=env.get("GEMINI_MODEL") or DEFAULT_MODEL,
            output_dir=os.path.abspath(output_dir),
            fetch_timeout=timeout,
        )

    def validate(self) -> None:
        if not isinstance(self.gemini_api_key, str) or not self.gemini_api_key.strip():
            raise ConfigurationError(
                "Missing or invalid Gemini API key. Please set GEMINI_API_KEY in your environment."
            )
        if not isinstance(self.google_credentials, str) or not self.google_credentials.strip():
            raise ConfigurationError(
                "Google Cloud TTS authentication failed. "
                "Missing Google Cloud credentials. Please set GOOGLE_APPLICATION_CREDENTIALS."
            )
