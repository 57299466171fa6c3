"""
Responder — canned replies for typed text

Provides:
- tokenize / InputReader — text to a set of lowercase words
- parse_keyword_text / parse_default_text — response file parsers
- ResponseEngine — keyword lookup with random default fallback
- load_config / ResponderConfig — YAML configuration with env overrides
"""

from .config import ResponderConfig, load_config
from .engine import ResponseEngine
from .observability import ResponseDecision
from .parsing import FALLBACK_RESPONSE, parse_default_text, parse_keyword_text
from .tokenizer import InputReader, read_input, tokenize

__all__ = [
    'ResponderConfig', 'load_config',
    'ResponseEngine', 'ResponseDecision',
    'FALLBACK_RESPONSE', 'parse_default_text', 'parse_keyword_text',
    'InputReader', 'read_input', 'tokenize',
]
