"""Helpers for the Streamlit page that talks to the generation API."""

import os
from urllib.parse import urljoin

import requests

DEFAULT_API_URL = "http://localhost:8000"
GENERATE_PATH = "/api/generate-podcast"
FALLBACK_ERROR = "Something went wrong during podcast generation."


class PodcastClientError(Exception):
    pass


def api_url() -> str:
    return os.environ.get("PODCAST_API_URL") or DEFAULT_API_URL


def can_submit(topics: str, blog_url: str, loading: bool) -> bool:
    if loading:
        return False
    return bool((topics or "").strip() or (blog_url or "").strip())


def audio_link(base_url: str, audio_url: str) -> str:
    """Absolute link to a root-relative audio path returned by the API."""
    return urljoin(base_url.rstrip("/") + "/", audio_url)


def request_podcast(base_url: str, topics: str, blog_url: str, timeout=None) -> dict:
    """POST both fields and return ``{"script": ..., "audioUrl": ...}``.

    Raises PodcastClientError carrying the server's error message.
    """
    try:
        response = requests.post(
            base_url.rstrip("/") + GENERATE_PATH,
            json={"topics": topics, "blogUrl": blog_url},
            timeout=timeout,
        )
    except requests.exceptions.RequestException as e:
        raise PodcastClientError(str(e))

    if not response.ok:
        try:
            message = response.json().get("error")
        except ValueError:
            message = None
        raise PodcastClientError(message or FALLBACK_ERROR)
    return response.json()
