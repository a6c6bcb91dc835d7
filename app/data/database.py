# app/data/database.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.utils.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


def make_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # sync handlery fastapi chodza w threadpoolu
        connect_args["check_same_thread"] = False

    logger.info(f"Creating database engine for {url.split('@')[-1]}")
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


def make_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@contextmanager
def read_only_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    """
    Zakres read-only: sesja otwierana na jedno zapytanie,
    nigdy nie commitujemy, zawsze rollback + close (takze przy bledzie).
    """
    db = session_factory()
    try:
        yield db
    except SQLAlchemyError as e:
        logger.error(f"Database read failed: {type(e).__name__}: {e}")
        raise
    finally:
        db.rollback()
        db.close()


def ping(engine: Engine) -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except SQLAlchemyError as e:
        logger.warning(f"Database health check failed: {e}")
        return False
