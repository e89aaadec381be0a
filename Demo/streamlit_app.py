import streamlit as st
import logging
from dotenv import load_dotenv

from podcast_generator.client import (
    PodcastClientError,
    api_url,
    audio_link,
    can_submit,
    request_podcast,
)

# --- Setup ---
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s"
)
logger = logging.getLogger(__name__)

BASE_URL = api_url()
REQUEST_TIMEOUT = 300

for key, default in (("loading", False), ("script", ""), ("audio_url", ""), ("error", "")):
    if key not in st.session_state:
        st.session_state[key] = default


def start_generation():
    st.session_state.loading = True
    st.session_state.error = ""
    st.session_state.script = ""
    st.session_state.audio_url = ""


# --- Main UI ---
st.title("🎙️ AI Podcast Generator")

topics = st.text_area(
    "Topics",
    placeholder='Enter topics or prompts for your podcast (e.g., "The future of AI, quantum computing")...',
    height=150,
)
st.write("OR")
blog_url = st.text_input(
    "Blog URL",
    placeholder="Enter a blog post URL (e.g., https://example.com/blog-post)",
)

st.button(
    "Generating..." if st.session_state.loading else "Generate Podcast",
    disabled=not can_submit(topics, blog_url, st.session_state.loading),
    on_click=start_generation,
)

if st.session_state.loading:
    with st.spinner("Generating podcast script and audio..."):
        try:
            data = request_podcast(BASE_URL, topics, blog_url, timeout=REQUEST_TIMEOUT)
            st.session_state.script = data.get("script", "")
            st.session_state.audio_url = audio_link(BASE_URL, data.get("audioUrl", ""))
        except PodcastClientError as e:
            logger.warning(f"Generation failed: {e}")
            st.session_state.error = str(e)
        finally:
            st.session_state.loading = False
    st.rerun()

if st.session_state.error:
    st.error(f"Error: {st.session_state.error}")

if st.session_state.script:
    st.subheader("Generated Script:")
    st.code(st.session_state.script, language="markdown")

if st.session_state.audio_url:
    st.subheader("Your Podcast:")
    st.audio(st.session_state.audio_url, format="audio/mp3")
    st.markdown(f"[Download Podcast]({st.session_state.audio_url})")
