"""
Capabilities the pipeline depends on. The Gemini, Cloud TTS and
requests/BeautifulSoup adapters implement these; tests inject fakes.
"""

from abc import ABC, abstractmethod


class TextGenerator(ABC):
    """Generative-text provider."""

    @abstractmethod
    def generate_text(self, prompt: str) -> str:
        """Return the model's reply to a single prompt."""
        pass


class SpeechSynthesizer(ABC):
    """Text-to-speech provider returning encoded audio."""

    @abstractmethod
    def synthesize_speech(self, text: str) -> bytes:
        """Return MP3 bytes for the given text."""
        pass


class ArticleExtractor(ABC):
    """Fetches a page and turns it into plain text."""

    @abstractmethod
    def fetch_and_extract(self, url: str) -> str:
        """Return the readable text of the page at url."""
        pass
