import logging

from google import genai
from google.genai import types

from podcast_generator.modules.config import DEFAULT_MODEL, MAX_ARTICLE_CHARS
from podcast_generator.modules.errors import ProviderError
from podcast_generator.modules.interfaces import TextGenerator

logger = logging.getLogger(__name__)

TOPICS_PROMPT = (
    "Generate a podcast script about the following topics: {topics}. "
    "The script should be engaging and conversational, suitable for a 5-minute podcast."
)

SUMMARY_PROMPT = (
    "Summarize the following text into an eye-catching 80-word summary "
    "suitable for a podcast introduction:\n\n{text}"
)

SUMMARY_SCRIPT = (
    "Here's an eye-catching summary of the blog post:\n\n"
    "{summary}\n\n"
    "Full podcast content would follow."
)


def topics_prompt(topics: str) -> str:
    return TOPICS_PROMPT.format(topics=topics)


def summary_prompt(article_text: str) -> str:
    return SUMMARY_PROMPT.format(text=article_text[:MAX_ARTICLE_CHARS])


def wrap_summary(summary: str) -> str:
    """Script shown to the listener for a blog summary."""
    return SUMMARY_SCRIPT.format(summary=summary)


class GeminiTextGenerator(TextGenerator):
    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, client=None):
        self.model = model
        self.client = client or genai.Client(api_key=api_key)

    def generate_text(self, prompt: str) -> str:
        contents = [
            types.Content(
                role="user",
                parts=[
                    types.Part.from_text(text=prompt),
                ],
            ),
        ]
        generate_content_config = types.GenerateContentConfig(
            response_mime_type="text/plain",
        )

        logger.info(f"Requesting text from {self.model}")
        result = ""
        for chunk in self.client.models.generate_content_stream(
            model=self.model,
            contents=contents,
            config=generate_content_config,
        ):
            if chunk.text:
                result += chunk.text

        if not result.strip():
            raise ProviderError(f"Empty response from {self.model}")
        logger.info(f"Received {len(result)} characters from {self.model}")
        return result
