"""
Link normaliser.
Turns free-text launcher input into a URL and hands its path to the Cleaner.
On success the URL is rewritten to the canonical product path with query and
fragment dropped; otherwise the parsed URL is returned as-is.
"""
import logging

from linkcleaner.models.models import Clean, Cleaned, Original
from linkcleaner.utils.url_cleaner import clean_segments
from linkcleaner.utils.weburl import WebUrl

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = 'https'


class CannotBeBaseError(ValueError):
    """Raised for URLs without a hierarchical path, e.g. 'mailto:' style links."""

    def __init__(self, message='url cannot be base'):
        super().__init__(message)


def parse_url(text: str) -> WebUrl:
    """Parse text as a URL, assuming https:// when it does not start with 'http'."""
    if not text.startswith('http'):
        text = f"{DEFAULT_SCHEME}://{text}"
    return WebUrl.parse(text)


def clean_url(url: WebUrl) -> Clean[WebUrl]:
    segments = url.path_segments()
    if segments is None:
        raise CannotBeBaseError()

    result = clean_segments(segments)
    if not result.is_cleaned:
        logger.info(f"No product path in {url}, keeping it")
        return Original(url)

    url.set_path('/'.join(result.value))
    url.set_query(None)
    url.set_fragment(None)
    logger.info(f"Cleaned product link to {url}")
    return Cleaned(url)


def clean_link(text: str) -> Clean[str]:
    """
    Clean a product link given as raw text.

    Raises UrlParseError if the text is not a URL even with a scheme added, and
    CannotBeBaseError if the URL has no path to clean.
    """
    url = parse_url(text)
    return clean_url(url).map(str)
