# marketplace/db/database.py
import logging
import time

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()

SLOW_QUERY_THRESHOLD_MS = 200


def build_engine(database_url: str) -> Engine:
    """Create an engine; SQLite URLs get the settings a threaded server needs."""
    kwargs = {"future": True, "echo": False}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite+pysqlite://"):
            # one shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(database_url, **kwargs)
    _setup_slow_query_logging(engine)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def _setup_slow_query_logging(engine: Engine) -> None:
    logger = logging.getLogger("sqlalchemy.slow")

    @event.listens_for(engine, "before_cursor_execute")
    def before_cursor(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("query_start_time", []).append(time.time())

    @event.listens_for(engine, "after_cursor_execute")
    def after_cursor(conn, cursor, statement, parameters, context, executemany):
        start_times = conn.info.get("query_start_time")
        if not start_times:
            return
        duration_ms = (time.time() - start_times.pop(-1)) * 1000
        if duration_ms >= SLOW_QUERY_THRESHOLD_MS:
            logger.warning(
                "Slow query detected",
                extra={"duration_ms": duration_ms, "statement": statement},
            )
