import logging
from typing import List, Optional

import requests

from selection.models import RawTrack

logger = logging.getLogger(__name__)


class CatalogError(RuntimeError):
    pass


class ITunesCatalog:
    def __init__(
        self,
        base_url: str = "https://itunes.apple.com/search",
        limit: int = 50,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.limit = limit
        self.timeout = timeout
        self.session = session or requests.Session()

    def search(self, term: str) -> List[RawTrack]:
        """Search the catalog for songs matching ``term``."""
        term = (term or "").strip()
        if not term:
            return []

        params = {"term": term, "media": "music", "limit": self.limit}
        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise CatalogError(f"iTunes search failed for {term!r}: {exc}") from exc
        except ValueError as exc:
            raise CatalogError(f"iTunes returned invalid JSON for {term!r}") from exc

        if not isinstance(data, dict):
            raise CatalogError(f"iTunes returned an unexpected payload for {term!r}")

        results = data.get("results") or []
        logger.info("iTunes returned %d results for %r", len(results), term)
        return [RawTrack.from_catalog(item) for item in results if isinstance(item, dict)]
