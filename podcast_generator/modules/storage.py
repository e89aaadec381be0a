import logging
import os
import time

logger = logging.getLogger(__name__)


def podcast_filename(now_ms=None) -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"podcast-{now_ms}.mp3"


def save_binary_file(file_name, data):
    with open(file_name, "wb") as f:
        f.write(data)
    logger.info(f"File saved to: {file_name}")


def save_podcast_audio(output_dir: str, audio: bytes) -> str:
    """Write audio into output_dir and return its root-relative URL."""
    filename = podcast_filename()
    os.makedirs(output_dir, exist_ok=True)
    save_binary_file(os.path.join(output_dir, filename), audio)
    return f"/{filename}"
