"""Grid table queries: descriptor decoding, predicate building and paging."""

from __future__ import annotations

from .classifiers import (
    DEFAULT_CLASSIFIERS,
    Classified,
    Classifier,
    ValueKind,
    classify,
    classify_instant,
    classify_numeric,
    classify_text,
)
from .compiler import build_page_select
from .pagination import Direction, Order, Page, PageRequest, Sort
from .paths import PathContext, resolve_path
from .specification import Specification, conjunction, disjunction
from .syntax import ColumnFilter, SortColumn, decode_filters, decode_sorting
from .translator import TableQueryTranslator

__all__ = [
    "DEFAULT_CLASSIFIERS",
    "Classified",
    "Classifier",
    "ColumnFilter",
    "Direction",
    "Order",
    "Page",
    "PageRequest",
    "PathContext",
    "Sort",
    "SortColumn",
    "Specification",
    "TableQueryTranslator",
    "ValueKind",
    "build_page_select",
    "classify",
    "classify_instant",
    "classify_numeric",
    "classify_text",
    "conjunction",
    "decode_filters",
    "decode_sorting",
    "disjunction",
    "resolve_path",
]
