"""
Shared fixtures: a throwaway SQLite database per test with the schema created,
repositories bound to it, and helpers for seeding writers/tags/links directly.
"""
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine, event

from techblog.database import Base, WriterModel, TagModel, article_tags, create_session_factory, session_scope
from techblog.repository import ArticleRepository, TagRepository, WriterRepository


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


class Seeder:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    def writer(self, name="writer"):
        with session_scope(self.session_factory) as db:
            row = WriterModel(name=name)
            db.add(row)
            db.flush()
            return row.id

    def tag(self, name):
        with session_scope(self.session_factory) as db:
            row = TagModel(name=name)
            db.add(row)
            db.flush()
            return row.id

    def link(self, article_id, *tag_ids):
        with session_scope(self.session_factory) as db:
            for tag_id in tag_ids:
                db.execute(article_tags.insert().values(article_id=article_id, tag_id=tag_id))


class StatementLog:
    def __init__(self):
        self.statements = []

    def __call__(self, conn, cursor, statement, parameters, context, executemany):
        self.statements.append(statement)

    def clear(self):
        self.statements.clear()

    def selects(self):
        return [s for s in self.statements if s.lstrip().upper().startswith("SELECT")]


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'techblog.db'}",
        connect_args={"check_same_thread": False, "timeout": 30},
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def tag_repo(session_factory):
    return TagRepository(session_factory)


@pytest.fixture
def article_repo(session_factory, tag_repo):
    return ArticleRepository(session_factory, tag_repo=tag_repo)


@pytest.fixture
def clocked_article_repo(session_factory, tag_repo, clock):
    return ArticleRepository(session_factory, tag_repo=tag_repo, clock=clock)


@pytest.fixture
def writer_repo(session_factory):
    return WriterRepository(session_factory)


@pytest.fixture
def seed(session_factory):
    return Seeder(session_factory)


@pytest.fixture
def statement_log(engine):
    log = StatementLog()
    event.listen(engine, "before_cursor_execute", log)
    yield log
    event.remove(engine, "before_cursor_execute", log)
