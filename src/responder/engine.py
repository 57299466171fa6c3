"""Keyword lookup with a random default fallback."""

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from .config import ResponderConfig
from .observability import ResponseDecision
from .parsing import FALLBACK_RESPONSE, parse_default_text, parse_keyword_text

logger = logging.getLogger(__name__)


def _read_text(path: Path, encoding: str) -> Optional[str]:
    try:
        with path.open("r", encoding=encoding) as handle:
            return handle.read()
    except FileNotFoundError:
        logger.error("Unable to open %s", path)
    except UnicodeDecodeError as exc:
        logger.error("A problem was encountered decoding %s: %s", path, exc)
    except OSError as exc:
        logger.error("A problem was encountered reading %s: %s", path, exc)
    return None


class ResponseEngine:
    """
    Maps input words to canned responses.

    Both tables are loaded once. A word found in the keyword table returns
    its response; otherwise one of the default responses is picked at random.
    Load failures are logged and leave the engine usable: an empty keyword
    table and/or the single fallback default response.
    """

    def __init__(
        self,
        responses_path: str | Path,
        defaults_path: str | Path,
        rng: Optional[random.Random] = None,
        defaults_encoding: str = "ascii",
        fallback_response: str = FALLBACK_RESPONSE,
    ) -> None:
        self._responses_path = Path(responses_path)
        self._defaults_path = Path(defaults_path)
        self._rng = rng if rng is not None else random.Random()
        self._keywords: Dict[str, str] = {}
        self._defaults: Tuple[str, ...] = (fallback_response,)
        self._load(defaults_encoding, fallback_response)

    @classmethod
    def from_config(
        cls, config: ResponderConfig, rng: Optional[random.Random] = None
    ) -> "ResponseEngine":
        if rng is None and config.random_seed is not None:
            rng = random.Random(config.random_seed)
        return cls(
            config.responses_path,
            config.defaults_path,
            rng=rng,
            defaults_encoding=config.defaults_encoding,
            fallback_response=config.fallback_response,
        )

    def _load(self, defaults_encoding: str, fallback_response: str) -> None:
        text = _read_text(self._responses_path, "utf-8")
        if text is not None:
            self._keywords = parse_keyword_text(text)

        text = _read_text(self._defaults_path, defaults_encoding)
        if text is not None:
            self._defaults = parse_default_text(text, fallback=fallback_response)

        logger.info(
            "Loaded %d keywords from %s, %d default responses from %s",
            len(self._keywords),
            self._responses_path,
            len(self._defaults),
            self._defaults_path,
        )

    def respond(self, words: Iterable[str]) -> ResponseDecision:
        # First match in the iteration order of ``words``; for a set that
        # order is arbitrary.
        words = list(words)
        decision = None
        for word in words:
            response = self._keywords.get(word)
            if response is not None:
                decision = ResponseDecision(
                    source="keyword", response=response, keyword_hit=word, word_count=len(words)
                )
                break

        if decision is None:
            decision = ResponseDecision(
                source="default",
                response=self._rng.choice(self._defaults),
                word_count=len(words),
            )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("decision=%s", decision.to_dict())
        return decision

    def generate_response(self, words: Iterable[str]) -> str:
        return self.respond(words).response

    def keywords(self) -> Dict[str, str]:
        return dict(self._keywords)

    @property
    def default_responses(self) -> Tuple[str, ...]:
        return self._defaults
