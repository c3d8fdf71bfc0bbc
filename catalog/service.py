import logging
import random
import string
from typing import List, Optional

from config import settings
from catalog.itunes import CatalogError, ITunesCatalog
from catalog.presentation import Song, to_song, unique_by_display_title
from catalog.rewriter import QueryRewriter, build_rewriter
from selection import SelectionConfig, deduplicate, select_tracks

logger = logging.getLogger(__name__)

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_SUFFIX_LENGTH = 5


class MusicSearchService:
    def __init__(
        self,
        catalog: ITunesCatalog,
        rewriter: Optional[QueryRewriter] = None,
        config: Optional[SelectionConfig] = None,
        rng: Optional[random.Random] = None,
        rewrite_min_words: int = 3,
    ):
        self.catalog = catalog
        self.rewriter = rewriter
        self.config = config or SelectionConfig()
        self.rng = rng or random.Random()
        self.rewrite_min_words = rewrite_min_words

    @classmethod
    def from_settings(cls) -> "MusicSearchService":
        catalog = ITunesCatalog(
            base_url=settings.ITUNES_SEARCH_URL,
            limit=settings.ITUNES_SEARCH_LIMIT,
            timeout=settings.ITUNES_TIMEOUT,
        )
        rewriter = build_rewriter(
            settings.GEMINI_API_KEY,
            model=settings.GEMINI_MODEL,
            base_url=settings.GEMINI_BASE_URL,
            timeout=settings.GEMINI_TIMEOUT,
        )
        config = SelectionConfig(
            max_results=settings.MAX_RESULTS,
            min_quality_score=settings.MIN_QUALITY_SCORE,
            prioritize_popularity=settings.PRIORITIZE_POPULARITY,
            ensure_genre_diversity=settings.ENSURE_GENRE_DIVERSITY,
            prefer_recent_releases=settings.PREFER_RECENT_RELEASES,
        )
        return cls(catalog, rewriter=rewriter, config=config, rewrite_min_words=settings.REWRITE_MIN_WORDS)

    def interpret_query(self, query: str) -> str:
        if self.rewriter is None or len(query.split(" ")) <= self.rewrite_min_words:
            return query
        try:
            term = self.rewriter(query)
        except Exception as exc:
            logger.warning("Query rewrite failed, using raw query: %s", exc)
            return query
        return (term or "").strip() or query

    def _id_suffix(self) -> str:
        return "".join(self.rng.choice(ID_ALPHABET) for _ in range(ID_SUFFIX_LENGTH))

    def search(self, query: str, config: Optional[SelectionConfig] = None) -> List[Song]:
        config = config or self.config
        term = self.interpret_query(query)

        try:
            tracks = self.catalog.search(term)
        except CatalogError as exc:
            logger.error("Search error: %s", exc)
            return []

        candidates = unique_by_display_title(deduplicate(tracks))
        selected = select_tracks(candidates, term, config)
        logger.info("Search %r -> %d candidates, %d selected", term, len(candidates), len(selected))
        return [to_song(track, self._id_suffix()) for track in selected]
