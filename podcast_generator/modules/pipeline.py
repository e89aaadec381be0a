"""
Request pipeline: validate -> [extract] -> generate -> synthesize -> persist.

Every stage returns a StepResult tagged with its stage name. The first failed
stage ends the run; nothing from later stages is attempted and no partial
result is returned to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from podcast_generator.modules.article_api import RequestsArticleExtractor
from podcast_generator.modules.config import MAX_ARTICLE_CHARS, PodcastConfig
from podcast_generator.modules.errors import (
    ArticleFetchError,
    PodcastError,
    ProviderError,
    SynthesisError,
)
from podcast_generator.modules.interfaces import (
    ArticleExtractor,
    SpeechSynthesizer,
    TextGenerator,
)
from podcast_generator.modules.script_api import (
    GeminiTextGenerator,
    summary_prompt,
    topics_prompt,
    wrap_summary,
)
from podcast_generator.modules.speech_api import GoogleSpeechSynthesizer
from podcast_generator.modules.storage import save_podcast_audio
from podcast_generator.modules.validation import (
    PodcastRequest,
    parse_request,
    validate_blog_url,
)

logger = logging.getLogger(__name__)

VALIDATING = "validating"
EXTRACTING = "extracting"
GENERATING = "generating"
SYNTHESIZING = "synthesizing"
PERSISTING = "persisting"


@dataclass(frozen=True)
class StepResult:
    stage: str
    value: Any = None
    error: Optional[PodcastError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class PodcastOutcome:
    """What one request produced.

    ``script`` may be set on a failed outcome (e.g. synthesis failed after the
    script was generated); it is kept for logging and never sent back.
    """

    script: Optional[str] = None
    audio_url: Optional[str] = None
    failed_stage: Optional[str] = None
    error: Optional[PodcastError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def status(self) -> int:
        return 200 if self.ok else self.error.status

    def to_payload(self) -> Dict[str, str]:
        if self.ok:
            return {"script": self.script, "audioUrl": self.audio_url}
        return {"error": self.error.user_message}


def default_provider(name: str, config: PodcastConfig):
    if name == "text_generator":
        return GeminiTextGenerator(config.gemini_api_key, model=config.model)
    if name == "speech_synthesizer":
        return GoogleSpeechSynthesizer()
    if name == "article_extractor":
        return RequestsArticleExtractor(timeout=config.fetch_timeout)
    raise KeyError(name)


class PodcastPipeline:
    """Runs one podcast request end to end.

    Providers that are not injected are built from the config the first time
    a request passes credential validation.
    """

    def __init__(
        self,
        config: PodcastConfig,
        *,
        text_generator: Optional[TextGenerator] = None,
        speech_synthesizer: Optional[SpeechSynthesizer] = None,
        article_extractor: Optional[ArticleExtractor] = None,
    ):
        self.config = config
        self._providers = {
            "text_generator": text_generator,
            "speech_synthesizer": speech_synthesizer,
            "article_extractor": article_extractor,
        }

    def _resolve_providers(self) -> Dict[str, Any]:
        for name, provider in self._providers.items():
            if provider is None:
                self._providers[name] = default_provider(name, self.config)
        return self._providers

    def _step(self, stage: str, func, *args, wrap=PodcastError) -> StepResult:
        try:
            return StepResult(stage, value=func(*args))
        except PodcastError as e:
            return StepResult(stage, error=e)
        except Exception as e:
            logger.exception(f"Unexpected failure while {stage}")
            return StepResult(stage, error=wrap(f"{type(e).__name__}: {e}"))

    def _fail(self, result: StepResult, script: Optional[str] = None) -> PodcastOutcome:
        error = result.error
        if error.public:
            logger.warning(f"Request failed while {result.stage} ({error.status}): {error.message}")
        else:
            logger.error(f"Request failed while {result.stage} ({error.status}): {error.message}")
        if script is not None:
            logger.error(f"Discarding generated script of {len(script)} characters")
        return PodcastOutcome(script=script, failed_stage=result.stage, error=error)

    # Stages

    def validate(self, payload) -> PodcastRequest:
        self.config.validate()
        request = parse_request(payload)
        if request.is_blog:
            request = PodcastRequest(blog_url=validate_blog_url(request.blog_url))
        self._resolve_providers()
        return request

    def extract(self, blog_url: str) -> str:
        text = self._providers["article_extractor"].fetch_and_extract(blog_url)
        return text[:MAX_ARTICLE_CHARS]

    def generate(self, request: PodcastRequest, article_text: Optional[str]):
        """Return (displayed script, text to speak)."""
        generator = self._providers["text_generator"]
        if request.is_blog:
            summary = generator.generate_text(summary_prompt(article_text))
            return wrap_summary(summary), summary
        script = generator.generate_text(topics_prompt(request.topics))
        return script, script

    def synthesize(self, text: str) -> bytes:
        audio = self._providers["speech_synthesizer"].synthesize_speech(text)
        if not audio:
            raise SynthesisError("No audio content received from TTS service.")
        return audio

    def persist(self, audio: bytes) -> str:
        return save_podcast_audio(self.config.output_dir, audio)

    def run(self, payload) -> PodcastOutcome:
        result = self._step(VALIDATING, self.validate, payload)
        if not result.ok:
            return self._fail(result)
        request = result.value

        article_text = None
        if request.is_blog:
            result = self._step(EXTRACTING, self.extract, request.blog_url, wrap=ArticleFetchError)
            if not result.ok:
                return self._fail(result)
            article_text = result.value
            logger.info(f"Using {len(article_text)} characters of article text")
        else:
            logger.info(f"Generating script for topics: {request.topics}")

        result = self._step(GENERATING, self.generate, request, article_text, wrap=ProviderError)
        if not result.ok:
            return self._fail(result)
        script, speech_text = result.value

        result = self._step(SYNTHESIZING, self.synthesize, speech_text, wrap=SynthesisError)
        if not result.ok:
            return self._fail(result, script=script)
        audio = result.value

        result = self._step(PERSISTING, self.persist, audio)
        if not result.ok:
            return self._fail(result, script=script)

        logger.info(f"Podcast ready at {result.value}")
        return PodcastOutcome(script=script, audio_url=result.value)
