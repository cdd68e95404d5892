"""
Database 모듈

DB 연결, 모델 정의
"""
from .connection import create_engine_from_env, create_session_factory, session_scope, read_scope
from .models import Base, WriterModel, ArticleModel, TagModel, article_tags

__all__ = [
    'create_engine_from_env',
    'create_session_factory',
    'session_scope',
    'read_scope',
    'Base',
    'WriterModel',
    'ArticleModel',
    'TagModel',
    'article_tags',
]
