"""
Repository 모듈

DB I/O를 담당하는 레이어
"""
from .errors import RepositoryError, NotFoundError, PersistenceError
from .batch import KeyedBatchLoader
from .tag_repository import TagRepository
from .article_repository import ArticleRepository, PAGE_SIZE, MAX_CURSOR
from .writer_repository import WriterRepository

__all__ = [
    'RepositoryError',
    'NotFoundError',
    'PersistenceError',
    'KeyedBatchLoader',
    'TagRepository',
    'ArticleRepository',
    'PAGE_SIZE',
    'MAX_CURSOR',
    'WriterRepository',
]
