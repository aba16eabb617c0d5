import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from app.api.deps import get_file_store
from app.core import config
from app.schemas.analytics import Order
from app.services.analytics import format_word_frequencies, top_words, total_word_count
from app.services.file_store import FileStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analytics"])


def parse_limit(value: Optional[str]) -> int:
    """Integer limit, falling back to the configured default when absent or unparseable."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return config.FREQ_WORDS_DEFAULT_LIMIT


@router.get("/wc", response_class=PlainTextResponse)
def word_count(store: FileStore = Depends(get_file_store)):
    return str(total_word_count(store))


@router.get("/freq-words", response_class=PlainTextResponse)
def frequent_words(
    limit: Optional[str] = Query(None),
    order: Optional[str] = Query(None),
    store: FileStore = Depends(get_file_store)
):
    entries = top_words(store, parse_limit(limit), Order.parse(order))
    logger.info("freq-words returned %d entries", len(entries))
    return PlainTextResponse(format_word_frequencies(entries))
