import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from pothub.core.errors import ConflictError, StorageUnavailableError

logger = logging.getLogger(__name__)

Base = declarative_base()


def _is_memory_sqlite(url: str) -> bool:
    return url in {"sqlite://", "sqlite:///:memory:"}


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    # PostgreSQL unique_violation
    if getattr(orig, "pgcode", None) == "23505":
        return True
    if getattr(orig, "sqlite_errorname", None) in {"SQLITE_CONSTRAINT_PRIMARYKEY", "SQLITE_CONSTRAINT_UNIQUE"}:
        return True
    return "UNIQUE constraint failed" in str(orig)


class Database:
    """Storage client shared by every store.

    Owns the engine (and therefore the connection pool) and hands out
    short-lived sessions. SQLAlchemy errors never leave this class untranslated:
    unique-key violations become ``ConflictError``, everything else
    ``StorageUnavailableError``.
    """

    def __init__(self, url: str, **engine_kwargs: Any) -> None:
        self.url = url
        if url.startswith("sqlite"):
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
            if _is_memory_sqlite(url):
                engine_kwargs.setdefault("poolclass", StaticPool)
        else:
            engine_kwargs.setdefault("pool_pre_ping", True)
        self.engine = create_engine(url, **engine_kwargs)
        self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)

    def create_all(self) -> None:
        try:
            Base.metadata.create_all(bind=self.engine)
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"Failed to create tables: {exc}") from exc

    def ping(self) -> None:
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"Database unreachable: {exc}") from exc

    @contextmanager
    def session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            if _is_unique_violation(exc):
                raise ConflictError(str(exc.orig)) from exc
            logger.error("Integrity error executing SQL statement: %s", exc)
            raise StorageUnavailableError(str(exc)) from exc
        except SQLAlchemyError as exc:
            logger.error("Error executing SQL statement: %s", exc)
            session.rollback()
            raise StorageUnavailableError(str(exc)) from exc
        finally:
            session.close()

    def dispose(self) -> None:
        self.engine.dispose()
