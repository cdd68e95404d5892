"""
Tag Repository

article_tags 연결 테이블을 통한 기사별 태그 조회
"""
from typing import Dict, Iterable, List, Sequence, Tuple

from sqlalchemy.orm import sessionmaker

from techblog.database import read_scope
from techblog.database.models import TagModel, article_tags
from techblog.domain import Tag
from techblog.repository.batch import KeyedBatchLoader
from techblog.repository.mapping import to_tag


class TagRepository:
    """Tag 조회"""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self._loader = KeyedBatchLoader(self._fetch_pairs)

    def list_by_article_id(self, article_id: int) -> List[Tag]:
        """
        단일 기사의 태그 조회

        Args:
            article_id: 기사 ID

        Returns:
            태그 리스트 (tag id 오름차순, 없으면 빈 리스트)
        """
        with read_scope(self.session_factory) as db:
            rows = db.query(TagModel).join(
                article_tags, article_tags.c.tag_id == TagModel.id
            ).filter(
                article_tags.c.article_id == article_id
            ).order_by(TagModel.id).all()
            return [to_tag(row) for row in rows]

    def list_map_by_article_ids(self, article_ids: Iterable[int]) -> Dict[int, List[Tag]]:
        """
        여러 기사의 태그를 한 번의 조회로 가져와 기사 ID별로 매핑

        Args:
            article_ids: 기사 ID 목록

        Returns:
            {기사 ID: 태그 리스트} (태그가 없는 기사도 빈 리스트로 포함)
        """
        return self._loader.load(article_ids)

    def _fetch_pairs(self, article_ids: Sequence[int]) -> List[Tuple[int, Tag]]:
        with read_scope(self.session_factory) as db:
            rows = db.query(
                article_tags.c.article_id, TagModel.id, TagModel.name
            ).join(
                TagModel, TagModel.id == article_tags.c.tag_id
            ).filter(
                article_tags.c.article_id.in_(article_ids)
            ).order_by(article_tags.c.article_id, TagModel.id).all()
            return [(row[0], Tag(id=row[1], name=row[2])) for row in rows]
