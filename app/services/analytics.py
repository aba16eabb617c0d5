import logging
from collections import Counter
from typing import Iterable, List, Union

from nltk.tokenize import WhitespaceTokenizer

from app.schemas.analytics import Order, WordFrequency
from app.services.file_store import FileStore

logger = logging.getLogger(__name__)

tokenizer = WhitespaceTokenizer()


def tokenize(content: Union[bytes, str]) -> List[str]:
    """Split content into maximal runs of non-whitespace, as-is (no case folding).

    Undecodable bytes survive as surrogate escapes so distinct byte sequences
    stay distinct words.
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="surrogateescape")
    return tokenizer.tokenize(content)


def total_word_count(store: FileStore) -> int:
    total = 0
    for name, content in store.list():
        count = len(tokenize(content))
        logger.debug("%s: %d words", name, count)
        total += count
    return total


def word_frequencies(store: FileStore) -> Counter:
    """Corpus-wide word counts over every file in the store."""
    words = []
    for _, content in store.list():
        words.extend(tokenize(content))
    return Counter(words)


def top_words(store: FileStore, limit: int, order: Order = Order.descending) -> List[WordFrequency]:
    """Words ranked by count, truncated to `limit`.

    Equal counts are ordered by word so results are reproducible across
    calls. A negative limit returns nothing.
    """
    limit = max(limit, 0)
    freq = word_frequencies(store)

    if order == Order.ascending:
        ranked = sorted(freq.items(), key=lambda x: (x[1], x[0]))
    else:
        ranked = sorted(freq.items(), key=lambda x: (-x[1], x[0]))

    logger.debug("Ranked %d distinct words (order=%s, limit=%d)", len(ranked), order.value, limit)
    return [WordFrequency(count=count, word=word) for word, count in ranked[:limit]]


def format_word_frequencies(entries: Iterable[WordFrequency]) -> bytes:
    """Tab-separated count and word per line, undecodable bytes restored as read."""
    text = "".join(f"{entry.count}\t{entry.word}\n" for entry in entries)
    return text.encode("utf-8", errors="surrogateescape")
