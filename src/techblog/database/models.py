from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Table
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# 기사-태그 연결 테이블 (조인 조건으로만 사용)
article_tags = Table(
    "article_tags",
    Base.metadata,
    Column("article_id", Integer, ForeignKey("articles.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)

class WriterModel(Base):
    __tablename__ = "writers"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=True)

class ArticleModel(Base):
    __tablename__ = "articles"
    __table_args__ = {"sqlite_autoincrement": True}
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    body = Column(Text, nullable=False)
    created = Column(DateTime(timezone=True), nullable=False)
    updated = Column(DateTime(timezone=True), nullable=False)
    writer_id = Column(Integer, ForeignKey("writers.id"), nullable=True, index=True)

class TagModel(Base):
    __tablename__ = "tags"
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
