import logging

from google.cloud import texttospeech

from podcast_generator.modules.errors import ConfigurationError, SynthesisError
from podcast_generator.modules.interfaces import SpeechSynthesizer

logger = logging.getLogger(__name__)

LANGUAGE_CODE = "en-US"


class GoogleSpeechSynthesizer(SpeechSynthesizer):
    """Cloud Text-to-Speech with one fixed neutral English voice, MP3 output.

    The client is created on first use, so missing or broken credentials
    surface when a request is made rather than at startup.
    """

    def __init__(self, client_factory=texttospeech.TextToSpeechClient):
        self.client_factory = client_factory
        self._client = None

    def _get_client(self):
        if self._client is None:
            try:
                self._client = self.client_factory()
            except Exception as e:
                raise ConfigurationError(f"Google Cloud TTS authentication failed. {e}")
        return self._client

    def synthesize_speech(self, text: str) -> bytes:
        client = self._get_client()
        logger.info(f"Synthesizing {len(text)} characters of speech")
        response = client.synthesize_speech(
            input=texttospeech.SynthesisInput(text=text),
            voice=texttospeech.VoiceSelectionParams(
                language_code=LANGUAGE_CODE,
                ssml_gender=texttospeech.SsmlVoiceGender.NEUTRAL,
            ),
            audio_config=texttospeech.AudioConfig(
                audio_encoding=texttospeech.AudioEncoding.MP3,
            ),
        )
        if not response.audio_content:
            raise SynthesisError("No audio content received from TTS service.")
        return response.audio_content
