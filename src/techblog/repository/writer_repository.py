"""
Writer Repository

writers 테이블 조회 (읽기 전용)
"""
from typing import List, Sequence, Tuple

from sqlalchemy.orm import sessionmaker

from techblog.database import read_scope
from techblog.database.models import ArticleModel, WriterModel
from techblog.domain import Article, Writer, WriterWithArticles
from techblog.repository.batch import KeyedBatchLoader
from techblog.repository.errors import NotFoundError
from techblog.repository.mapping import to_article, to_writer


class WriterRepository:
    """Writer 조회"""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self._articles_loader = KeyedBatchLoader(self._fetch_articles)

    def get_by_id(self, writer_id: int) -> Writer:
        """
        ID로 작성자 조회

        Raises:
            NotFoundError: 해당 ID의 작성자가 없음
        """
        with read_scope(self.session_factory) as db:
            row = db.query(WriterModel).filter(WriterModel.id == writer_id).one_or_none()
            if row is None:
                raise NotFoundError("writer", writer_id)
            return to_writer(row)

    def get_with_articles(self, writer_id: int) -> WriterWithArticles:
        """작성자 + 작성 기사 목록 조회"""
        writer = self.get_by_id(writer_id)
        articles = self._articles_loader.load([writer_id])[writer_id]
        return WriterWithArticles(writer=writer, articles=tuple(articles))

    def list_with_articles(self) -> List[WriterWithArticles]:
        """
        전체 작성자 + 작성 기사 목록 조회

        작성자 1회 + 기사 1회, 총 2번의 조회로 처리
        """
        with read_scope(self.session_factory) as db:
            writers = [to_writer(row) for row in db.query(WriterModel).order_by(WriterModel.id).all()]

        article_map = self._articles_loader.load([writer.id for writer in writers])
        return [
            WriterWithArticles(writer=writer, articles=tuple(article_map.get(writer.id, [])))
            for writer in writers
        ]

    def _fetch_articles(self, writer_ids: Sequence[int]) -> List[Tuple[int, Article]]:
        with read_scope(self.session_factory) as db:
            rows = db.query(ArticleModel).filter(
                ArticleModel.writer_id.in_(writer_ids)
            ).order_by(ArticleModel.id).all()
            return [(row.writer_id, to_article(row)) for row in rows]
