"""
Launcher results.
Builds the result row shown by the launcher for a query and writes rows out
in its script-filter JSON format: {"items": [...]}.
"""
import json
import logging
import sys

from linkcleaner.models.models import Cleaned, Item
from linkcleaner.services.link_normalizer import CannotBeBaseError, clean_link
from linkcleaner.utils.weburl import UrlParseError

logger = logging.getLogger(__name__)

MISSING_QUERY_TITLE = 'Provide an Amazon URL'
KEPT_SUBTITLE = 'Kept in its original form; could not find a product page'


def build_item(query: str | None) -> Item:
    """Clean the query and describe the outcome as a single launcher row."""
    if query is None:
        return Item(MISSING_QUERY_TITLE, valid=False)

    try:
        result = clean_link(query)
    except (UrlParseError, CannotBeBaseError) as e:
        logger.warning(f"Rejected query {query!r}: {e}")
        return Item(str(e), valid=False)

    url = result.value
    if isinstance(result, Cleaned):
        return Item(url, arg=url, subtitle=f"Cleaned from {query}")
    return Item(url, arg=url, subtitle=KEPT_SUBTITLE)


def render_items(items) -> dict:
    return {'items': [item.to_dict() for item in items]}


def output(items, stream=None):
    """Write the rows to stream (stdout by default) as one JSON document."""
    stream = stream or sys.stdout
    json.dump(render_items(items), stream)
    stream.write('\n')
    stream.flush()
