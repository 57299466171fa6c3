#!/usr/bin/env python3
"""
Responder console

Reads typed text from the terminal and answers each turn:
  Keyword known  → its canned response
  Nothing known  → a random default response

Input may span several lines and ends with a blank line.
Typing one of the exit words (default: bye) ends the session.

Usage:
  RESPONDER_CONFIG=config/responder.defaults.yml python -m responder.console
"""

import logging
import os
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from responder.config import DEFAULT_CONFIG_PATH, ResponderConfig, load_config, merge_env_overrides
from responder.engine import ResponseEngine
from responder.tokenizer import InputReader

logger = logging.getLogger(__name__)


class SupportSession:
    """One read → tokenize → respond → print conversation."""

    def __init__(
        self,
        engine: ResponseEngine,
        reader: InputReader,
        output: Optional[TextIO] = None,
        exit_words: Iterable[str] = ("bye",),
        welcome: str = "",
        goodbye: str = "",
    ) -> None:
        self.engine = engine
        self.reader = reader
        self.output = output if output is not None else sys.stdout
        self.exit_words = frozenset(exit_words)
        self.welcome = welcome
        self.goodbye = goodbye

    def _say(self, text: str) -> None:
        if text:
            self.output.write(text + "\n")

    def run(self) -> int:
        """Run until an exit word or end of input. Returns the number of replies."""
        replies = 0
        self._say(self.welcome)

        while True:
            words = self.reader.get_input()
            if words is None:
                logger.info("End of input, closing session")
                break
            if words & self.exit_words:
                break
            self._say(self.engine.generate_response(words))
            replies += 1

        self._say(self.goodbye)
        return replies


def _load(config_path: Path) -> ResponderConfig:
    if config_path.exists():
        return load_config(config_path)
    return ResponderConfig.from_dict(merge_env_overrides({}))


def main() -> int:
    """Start a console session on stdin/stdout."""
    config_path = Path(os.environ.get("RESPONDER_CONFIG", DEFAULT_CONFIG_PATH))
    config = _load(config_path)

    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        level=config.log_level,
        stream=sys.stderr,
    )
    if not config_path.exists():
        logger.warning("Config %s not found, using built-in defaults", config_path)

    engine = ResponseEngine.from_config(config)
    reader = InputReader(sys.stdin, sys.stdout, prompt=config.prompt)
    session = SupportSession(
        engine,
        reader,
        sys.stdout,
        exit_words=config.exit_words,
        welcome=config.welcome_message,
        goodbye=config.goodbye_message,
    )
    session.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
