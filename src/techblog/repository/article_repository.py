"""
Article Repository

articles 테이블에 대한 DB I/O 담당
"""
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from techblog.database import read_scope, session_scope
from techblog.database.models import ArticleModel, WriterModel, article_tags
from techblog.domain import (
    Article,
    ArticleSummaryWithTags,
    ArticleWithTags,
    ArticleWithWriter,
    ArticleWithWriterName,
    Writer,
    WriteResult,
)
from techblog.repository.errors import NotFoundError, PersistenceError
from techblog.repository.mapping import to_article
from techblog.repository.tag_repository import TagRepository

logger = logging.getLogger(__name__)

PAGE_SIZE = 10
MAX_CURSOR = 2 ** 31 - 1


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ArticleRepository:
    """Article CRUD 및 조인 조회"""

    def __init__(
        self,
        session_factory: sessionmaker,
        tag_repo: Optional[TagRepository] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.session_factory = session_factory
        self.tag_repo = tag_repo or TagRepository(session_factory)
        self.clock = clock

    def create(self, article: Article) -> WriteResult:
        """
        기사 생성

        Args:
            article: title, body (선택적으로 writer_id)가 채워진 기사

        Returns:
            생성된 ID를 담은 WriteResult

        Raises:
            PersistenceError: DB 오류 (rollback 완료 후)
        """
        now = self.clock()
        try:
            with session_scope(self.session_factory) as db:
                row = ArticleModel(
                    title=article.title,
                    body=article.body,
                    created=now,
                    updated=now,
                    writer_id=article.writer_id,
                )
                db.add(row)
                db.flush()  # ID 획득
                new_id = row.id
        except SQLAlchemyError as e:
            logger.error(f"Failed to create article: {e}")
            raise PersistenceError("failed to create article") from e

        logger.info(f"Created article #{new_id}")
        return WriteResult(rows_affected=1, last_insert_id=new_id)

    def get_by_id(self, article_id: int) -> Article:
        """
        ID로 기사 조회 (조인 없음)

        Raises:
            NotFoundError: 해당 ID의 기사가 없음
        """
        with read_scope(self.session_factory) as db:
            row = db.query(ArticleModel).filter(ArticleModel.id == article_id).one_or_none()
            if row is None:
                raise NotFoundError("article", article_id)
            return to_article(row)

    def update(self, article: Article) -> WriteResult:
        """
        기사 제목/본문 수정

        Args:
            article: id, title, body가 채워진 기사

        Returns:
            WriteResult (대상이 없으면 rows_affected == 0)

        Raises:
            PersistenceError: DB 오류 (rollback 완료 후)
        """
        now = self.clock()
        try:
            with session_scope(self.session_factory) as db:
                rows_affected = db.query(ArticleModel).filter(
                    ArticleModel.id == article.id
                ).update(
                    {
                        ArticleModel.title: article.title,
                        ArticleModel.body: article.body,
                        # updated는 뒤로 가지 않는다
                        ArticleModel.updated: case(
                            (ArticleModel.updated > now, ArticleModel.updated),
                            else_=now,
                        ),
                    },
                    synchronize_session=False
                )
        except SQLAlchemyError as e:
            logger.error(f"Failed to update article #{article.id}: {e}")
            raise PersistenceError(f"failed to update article {article.id}") from e

        logger.info(f"Updated article #{article.id} (rows: {rows_affected})")
        return WriteResult(rows_affected=rows_affected)

    def delete(self, article_id: int) -> WriteResult:
        """
        기사 삭제 (태그 연결 포함)

        존재하지 않는 ID는 rows_affected == 0으로 성공 처리

        Raises:
            PersistenceError: DB 오류 (rollback 완료 후)
        """
        try:
            with session_scope(self.session_factory) as db:
                db.execute(
                    article_tags.delete().where(article_tags.c.article_id == article_id)
                )
                rows_affected = db.query(ArticleModel).filter(
                    ArticleModel.id == article_id
                ).delete(synchronize_session=False)
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete article #{article_id}: {e}")
            raise PersistenceError(f"failed to delete article {article_id}") from e

        logger.info(f"Deleted article #{article_id} (rows: {rows_affected})")
        return WriteResult(rows_affected=rows_affected)

    def list_by_cursor(self, cursor: int) -> List[Article]:
        """
        커서 기반 목록 조회 (ID 내림차순, 최대 PAGE_SIZE건)

        Args:
            cursor: 이전 페이지에서 본 가장 작은 ID (0 이하면 첫 페이지)

        Returns:
            id < cursor 인 기사 리스트
        """
        if cursor <= 0:
            cursor = MAX_CURSOR

        with read_scope(self.session_factory) as db:
            rows = db.query(ArticleModel).filter(
                ArticleModel.id < cursor
            ).order_by(ArticleModel.id.desc()).limit(PAGE_SIZE).all()
            return [to_article(row) for row in rows]

    def get_with_writer_name(self, article_id: int) -> ArticleWithWriterName:
        """
        기사 + 작성자 이름 조회

        INNER JOIN이므로 작성자가 없는 기사는 NotFoundError.
        작성자 이름이 NULL이면 빈 문자열.
        """
        with read_scope(self.session_factory) as db:
            row = db.query(
                ArticleModel.id,
                ArticleModel.title,
                func.coalesce(WriterModel.name, "").label("writer_name"),
            ).join(
                WriterModel, WriterModel.id == ArticleModel.writer_id
            ).filter(
                ArticleModel.id == article_id,
                ArticleModel.writer_id.isnot(None)
            ).one_or_none()

        if row is None:
            raise NotFoundError("article", article_id)
        return ArticleWithWriterName(id=row.id, title=row.title, writer_name=row.writer_name)

    def get_with_writer(self, article_id: int) -> ArticleWithWriter:
        """
        기사 + 작성자(id, name) 조회

        INNER JOIN이므로 작성자가 없는 기사는 NotFoundError.
        """
        with read_scope(self.session_factory) as db:
            row = db.query(
                ArticleModel.id,
                ArticleModel.title,
                WriterModel.id.label("writer_id"),
                WriterModel.name.label("writer_name"),
            ).join(
                WriterModel, WriterModel.id == ArticleModel.writer_id
            ).filter(
                ArticleModel.id == article_id
            ).one_or_none()

        if row is None:
            raise NotFoundError("article", article_id)
        writer = Writer(id=row.writer_id, name=row.writer_name if row.writer_name is not None else "")
        return ArticleWithWriter(id=row.id, title=row.title, writer=writer)

    def list_by_writer_id(self, writer_id: int) -> List[Article]:
        """작성자별 기사 조회 (정렬 보장 없음)"""
        with read_scope(self.session_factory) as db:
            rows = db.query(ArticleModel).filter(ArticleModel.writer_id == writer_id).all()
            return [to_article(row) for row in rows]

    def get_with_tags(self, article_id: int) -> ArticleWithTags:
        """
        기사 + 태그 조회

        Raises:
            NotFoundError: 해당 ID의 기사가 없음
        """
        article = self.get_by_id(article_id)
        tags = self.tag_repo.list_by_article_id(article_id)
        return ArticleWithTags(article=article, tags=tuple(tags))

    def list_with_tags(self) -> List[ArticleSummaryWithTags]:
        """
        전체 기사(id, title) + 태그 조회

        기사 1회 + 태그 1회, 총 2번의 조회로 처리
        """
        with read_scope(self.session_factory) as db:
            rows = db.query(ArticleModel.id, ArticleModel.title).all()
            summaries = [(row.id, row.title) for row in rows]

        # 태그 일괄 조회
        tag_map = self.tag_repo.list_map_by_article_ids([article_id for article_id, _ in summaries])

        return [
            ArticleSummaryWithTags(
                id=article_id,
                title=title,
                tags=tuple(tag_map.get(article_id, [])),
            )
            for article_id, title in summaries
        ]
