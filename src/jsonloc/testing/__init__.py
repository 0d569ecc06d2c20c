from __future__ import annotations

from .corpus import generate_json_sources
from .laws import SpanLawChecker, check_span_laws, to_python

__all__ = ["SpanLawChecker", "check_span_laws", "generate_json_sources", "to_python"]
