from __future__ import annotations

import logging

from .ast import Value
from .errors import JsonError
from .lexer import tokenize
from .parser import DEFAULT_MAX_DEPTH, parse


_LOG = logging.getLogger(__name__)


def parse_source(src: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Tokenize and parse a JSON document into a located AST."""
    try:
        toks = tokenize(src)
        _LOG.debug("tokenized %d characters into %d tokens", len(src), len(toks))
        return parse(toks, max_depth=max_depth)
    except JsonError as e:
        _LOG.debug("rejected JSON input at %s: %s", e.span.format(), e.message)
        raise
