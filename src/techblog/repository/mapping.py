"""
Row Mapping

ORM 행 -> 도메인 값 변환
"""
from datetime import datetime, timezone
from typing import Optional

from techblog.database.models import ArticleModel, TagModel, WriterModel
from techblog.domain import Article, Tag, Writer


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite는 tzinfo 없이 돌려준다 (저장 값은 항상 UTC)
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_article(row: ArticleModel) -> Article:
    return Article(
        id=row.id,
        title=row.title,
        body=row.body,
        created=as_utc(row.created),
        updated=as_utc(row.updated),
        writer_id=row.writer_id,
    )


def to_writer(row: WriterModel) -> Writer:
    return Writer(id=row.id, name=row.name if row.name is not None else "")


def to_tag(row: TagModel) -> Tag:
    return Tag(id=row.id, name=row.name)
