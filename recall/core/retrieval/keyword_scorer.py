"""
Lexical keyword scoring.

Ranks chunks by whole-word keyword hits in their text plus a bonus for
keywords appearing in the owning item's title. Recovers exact-term queries
(rare names, identifiers) that embeddings under-weight.

Dependencies: re (stdlib), recall.models.retrieval
System role: Keyword tier of the hybrid retrieval cascade
"""

import logging
import re
from collections.abc import Iterable

from recall.models.retrieval import RetrievalResult, RetrievalTier, StoredChunk

logger = logging.getLogger(__name__)

STOP_WORDS = frozenset({
    "what",
    "is",
    "how",
    "the",
    "and",
    "was",
    "for",
    "who",
    "where",
    "when",
    "this",
    "that",
    "with",
    "are",
    "your",
})

MIN_KEYWORD_LENGTH = 3
CONTENT_HIT_POINTS = 100
TITLE_HIT_POINTS = 200

_TOKEN_SPLIT = re.compile(r"\W+")


def extract_keywords(query: str) -> list[str]:
    """
    Extract scoring keywords from a query.

    Args:
        query: Raw question text

    Returns:
        list[str]: Lower-cased tokens of length >= 3 that are not stop words
    """
    return [
        token
        for token in _TOKEN_SPLIT.split(query.lower())
        if len(token) >= MIN_KEYWORD_LENGTH and token not in STOP_WORDS
    ]


class KeywordScorer:
    """Whole-word keyword scorer with title bonus."""

    def score(self, keywords: list[str], chunk: StoredChunk) -> int:
        """
        Score one chunk against pre-extracted keywords.

        Args:
            keywords: Output of extract_keywords
            chunk: Chunk with its item title

        Returns:
            int: 100 per whole-word content hit plus 200 per keyword in the title
        """
        content = chunk.content.lower()
        title = (chunk.item_title or "").lower()
        total = 0
        for word in keywords:
            hits = len(re.findall(rf"\b{re.escape(word)}\b", content))
            total += hits * CONTENT_HIT_POINTS
            if word in title:
                total += TITLE_HIT_POINTS
        return total

    def search(
        self,
        query: str,
        chunks: Iterable[StoredChunk],
        top_k: int = 5,
    ) -> list[RetrievalResult]:
        """
        Rank chunks by keyword relevance.

        Args:
            query: Question text
            chunks: Candidate chunks
            top_k: Maximum number of results

        Returns:
            list[RetrievalResult]: Non-zero matches, best first (stable on ties)
        """
        keywords = extract_keywords(query)
        logger.debug(f"{__name__}:search - keywords={keywords}")
        if not keywords:
            return []

        scored = []
        for chunk in chunks:
            points = self.score(keywords, chunk)
            if points > 0:
                scored.append(RetrievalResult.from_chunk(chunk, float(points), RetrievalTier.KEYWORD))

        scored.sort(key=lambda r: r.score, reverse=True)
        results = scored[:top_k]
        logger.debug(f"{__name__}:search - matched={len(scored)}, returned={len(results)}")
        return results
