"""
Domain 모듈

호출자에게 반환되는 불변 엔티티 값
"""
from .entities import (
    Writer,
    Article,
    Tag,
    ArticleSummary,
    ArticleWithWriterName,
    ArticleWithWriter,
    ArticleWithTags,
    ArticleSummaryWithTags,
    WriterWithArticles,
    WriteResult,
)

__all__ = [
    'Writer',
    'Article',
    'Tag',
    'ArticleSummary',
    'ArticleWithWriterName',
    'ArticleWithWriter',
    'ArticleWithTags',
    'ArticleSummaryWithTags',
    'WriterWithArticles',
    'WriteResult',
]
