"""Shared fakes and fixtures.

The three provider capabilities are replaced with in-memory fakes so no test
touches Gemini, Cloud TTS or a remote host.
"""

import pytest

from podcast_generator.main_api import create_app
from podcast_generator.modules.config import PodcastConfig
from podcast_generator.modules.interfaces import (
    ArticleExtractor,
    SpeechSynthesizer,
    TextGenerator,
)

FAKE_AUDIO = b"ID3\x03\x00fake-mp3-bytes"


class FakePageResponse:
    """Stands in for a streamed requests.Response."""

    def __init__(self, html="", ok=True, reason="OK", content_type="text/html; charset=utf-8", encoding="utf-8"):
        self.ok = ok
        self.reason = reason
        self.headers = {"Content-Type": content_type}
        self.encoding = encoding
        self.body = html.encode(encoding or "utf-8")
        self.closed = False

    def iter_content(self, chunk_size=1):
        for start in range(0, len(self.body), chunk_size):
            yield self.body[start:start + chunk_size]

    def close(self):
        self.closed = True


class FakeTextGenerator(TextGenerator):
    def __init__(self, reply="Welcome to the show. Today we talk about AI.", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def generate_text(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeSpeechSynthesizer(SpeechSynthesizer):
    def __init__(self, audio=FAKE_AUDIO, error=None):
        self.audio = audio
        self.error = error
        self.texts = []

    def synthesize_speech(self, text):
        self.texts.append(text)
        if self.error is not None:
            raise self.error
        return self.audio


class FakeArticleExtractor(ArticleExtractor):
    def __init__(self, text="Heading\nSome article text.\n", error=None):
        self.text = text
        self.error = error
        self.urls = []

    def fetch_and_extract(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "public"


@pytest.fixture
def config(output_dir):
    return PodcastConfig(
        gemini_api_key="test-key",
        google_credentials="/tmp/service-account.json",
        output_dir=str(output_dir),
    )


@pytest.fixture
def text_generator():
    return FakeTextGenerator()


@pytest.fixture
def speech_synthesizer():
    return FakeSpeechSynthesizer()


@pytest.fixture
def article_extractor():
    return FakeArticleExtractor()


@pytest.fixture
def app(config, text_generator, speech_synthesizer, article_extractor):
    return create_app(
        config,
        text_generator=text_generator,
        speech_synthesizer=speech_synthesizer,
        article_extractor=article_extractor,
    )


@pytest.fixture
def client(app):
    return app.test_client()
