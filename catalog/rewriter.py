import logging
from typing import Callable, Optional

import requests

logger = logging.getLogger(__name__)

QueryRewriter = Callable[[str], str]

PROMPT_TEMPLATE = (
    "Convert this user vibe description into a simple 1-2 word search term for a "
    'music database (e.g. "rainy day" -> "acoustic", "gym" -> "workout"). '
    'Input: "{query}"'
)


class QueryRewriteError(RuntimeError):
    pass


class GeminiQueryRewriter:
    """Turns a free-form "vibe" into a short catalog search term with Gemini."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        base_url: str = "https://generativelanguage.googleapis.com/v1beta/models",
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def __call__(self, query: str) -> str:
        url = f"{self.base_url}/{self.model}:generateContent"
        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }
        payload = {
            "contents": [
                {"parts": [{"text": PROMPT_TEMPLATE.format(query=query)}]}
            ]
        }

        try:
            response = self.session.post(url, headers=headers, json=payload, timeout=self.timeout)
            response.raise_for_status()
            result = response.json()
        except requests.RequestException as exc:
            raise QueryRewriteError(f"Gemini request failed: {exc}") from exc
        except ValueError as exc:
            raise QueryRewriteError("Gemini returned invalid JSON") from exc

        try:
            parts = result["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError) as exc:
            raise QueryRewriteError("Gemini response had no candidates") from exc

        text = "".join(p.get("text", "") for p in parts if isinstance(p, dict)).strip()
        return text or query


def build_rewriter(
    api_key: Optional[str],
    model: str = "gemini-2.5-flash",
    base_url: str = "https://generativelanguage.googleapis.com/v1beta/models",
    timeout: float = 15.0,
) -> Optional[GeminiQueryRewriter]:
    if not api_key:
        logger.info("Query rewriter: offline (no API key)")
        return None
    logger.info("Query rewriter: online (%s)", model)
    return GeminiQueryRewriter(api_key, model=model, base_url=base_url, timeout=timeout)
