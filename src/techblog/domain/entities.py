"""
Domain Entities

DB 행에서 복사된 값 객체. 조인 결과(작성자 이름, 태그)는 조회 형태별
프로젝션 타입으로만 제공되며 영속 대상이 아니다.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True)
class Writer:
    id: int
    name: str


@dataclass(frozen=True)
class Tag:
    id: int
    name: str


@dataclass(frozen=True)
class Article:
    """
    기사

    id, created, updated는 저장소가 채운다 (입력 시 무시).
    writer_id는 생성 시에만 지정 가능하다.
    """
    title: str
    body: str
    id: Optional[int] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    writer_id: Optional[int] = None


@dataclass(frozen=True)
class ArticleSummary:
    id: int
    title: str


@dataclass(frozen=True)
class ArticleWithWriterName:
    id: int
    title: str
    writer_name: str


@dataclass(frozen=True)
class ArticleWithWriter:
    id: int
    title: str
    writer: Writer


@dataclass(frozen=True)
class ArticleWithTags:
    article: Article
    tags: Tuple[Tag, ...] = ()


@dataclass(frozen=True)
class ArticleSummaryWithTags:
    id: int
    title: str
    tags: Tuple[Tag, ...] = ()


@dataclass(frozen=True)
class WriterWithArticles:
    writer: Writer
    articles: Tuple[Article, ...] = ()


@dataclass(frozen=True)
class WriteResult:
    """쓰기 결과 메타데이터"""
    rows_affected: int
    last_insert_id: Optional[int] = None
