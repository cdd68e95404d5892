"""
Database Connection

엔진/세션 팩토리 생성 및 트랜잭션 스코프
"""
from contextlib import contextmanager
import logging
import os
from typing import Iterator, Optional

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

load_dotenv()

logger = logging.getLogger(__name__)


def create_engine_from_env(database_url: Optional[str] = None) -> Engine:
    """
    엔진 생성

    Args:
        database_url: SQLAlchemy URL (없으면 DATABASE_URL 환경 변수 사용)

    Returns:
        SQLAlchemy Engine
    """
    url = database_url or os.getenv("DATABASE_URL")
    if not url:
        raise ValueError("DATABASE_URL is not set")

    echo = os.getenv("DATABASE_ECHO", "false").lower() in ("1", "true")
    return create_engine(url, echo=echo)


def create_session_factory(engine: Engine) -> sessionmaker:
    """세션 팩토리 생성"""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def session_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """쓰기 작업용 스코프: 성공 시 commit, 예외 시 rollback"""
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        try:
            db.rollback()
        except SQLAlchemyError:
            logger.warning("Rollback failed", exc_info=True)
        raise
    finally:
        db.close()


@contextmanager
def read_scope(session_factory: sessionmaker) -> Iterator[Session]:
    """읽기 작업용 스코프 (commit 없음)"""
    db = session_factory()
    try:
        yield db
    finally:
        db.close()
