import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError

import requests
from bs4 import BeautifulSoup

from podcast_generator.modules.config import DEFAULT_FETCH_TIMEOUT
from podcast_generator.modules.errors import ArticleFetchError
from podcast_generator.modules.interfaces import ArticleExtractor

logger = logging.getLogger(__name__)

TEXT_TAGS = ["p", "h1", "h2", "h3", "h4", "h5", "h6", "li"]
HIDDEN_TAGS = ["script", "style", "noscript"]
CHUNK_SIZE = 8192


def extract_article_text(html) -> str:
    """Pull readable text out of a page.

    Paragraphs, headings and list items are taken in document order, one per
    line. Pages with none of those fall back to the whole body text. Raw
    bytes are accepted and decoded by BeautifulSoup.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(HIDDEN_TAGS):
        tag.decompose()

    article_text = ""
    for element in soup.find_all(TEXT_TAGS):
        article_text += element.get_text() + "\n"

    if not article_text.strip():
        body = soup.body if soup.body is not None else soup
        article_text = body.get_text()
    return article_text


def _page_markup(response, content: bytes):
    # Without a declared charset BeautifulSoup sniffs the encoding itself.
    if "charset=" not in response.headers.get("Content-Type", "").lower():
        return content
    try:
        return content.decode(response.encoding, errors="replace")
    except (LookupError, TypeError):
        return content


class RequestsArticleExtractor(ArticleExtractor):
    """Fetches a page with requests under one deadline for the whole transfer.

    ``timeout`` bounds connecting, the headers and the body together. The
    download runs on a worker thread; when the deadline passes the caller
    gets a timeout error and the worker is told to stop and its response is
    closed.
    """

    def __init__(self, timeout: float = DEFAULT_FETCH_TIMEOUT, session=None):
        self.timeout = timeout
        self.session = session or requests

    def _download(self, url, cancelled, responses):
        response = self.session.get(url, timeout=self.timeout, stream=True)
        responses.append(response)
        if not response.ok:
            response.close()
            return response, b""

        chunks = []
        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
            if cancelled.is_set():
                break
            if chunk:
                chunks.append(chunk)
        response.close()
        return response, b"".join(chunks)

    def fetch_and_extract(self, url: str) -> str:
        logger.info(f"Fetching blog content from {url}")
        cancelled = threading.Event()
        responses = []
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(self._download, url, cancelled, responses)
        try:
            response, content = future.result(timeout=self.timeout)
        except FutureTimeoutError:
            cancelled.set()
            for response in responses:
                response.close()
            raise ArticleFetchError(f"Fetch request to {url} timed out.")
        except requests.exceptions.Timeout:
            raise ArticleFetchError(f"Fetch request to {url} timed out.")
        except requests.exceptions.RequestException as e:
            raise ArticleFetchError(f"Network error fetching {url}: {e}")
        finally:
            executor.shutdown(wait=False)

        if not response.ok:
            raise ArticleFetchError(
                f"Failed to fetch blog content from {url}: {response.reason}"
            )

        text = extract_article_text(_page_markup(response, content))
        logger.info(f"Extracted {len(text)} characters from {url}")
        return text
