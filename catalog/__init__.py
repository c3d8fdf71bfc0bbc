from catalog.itunes import ITunesCatalog, CatalogError
from catalog.rewriter import GeminiQueryRewriter, QueryRewriteError, build_rewriter
from catalog.presentation import Song, clean_title, string_to_color, to_song
from catalog.service import MusicSearchService

__all__ = [
    "ITunesCatalog", "CatalogError",
    "GeminiQueryRewriter", "QueryRewriteError", "build_rewriter",
    "Song", "clean_title", "string_to_color", "to_song",
    "MusicSearchService",
]
