"""Comment-block parsing into help models."""

from .keywords import KEYWORD_ORDER, REPEATABLE_KEYWORDS, Keyword
from .sectioner import (
    CommentBlockSectioner,
    KeywordToken,
    Section,
    build_help_model,
    extract_comment_block,
)

__all__ = [
    "CommentBlockSectioner",
    "KEYWORD_ORDER",
    "Keyword",
    "KeywordToken",
    "REPEATABLE_KEYWORDS",
    "Section",
    "build_help_model",
    "extract_comment_block",
]
