import threading

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from .config import settings

DATABASE_URL = settings.database_url


def _use_immediate_transactions(engine: Engine) -> None:
    """
    Make every SQLite transaction start with BEGIN IMMEDIATE so it holds the write lock from
    its first statement. Concurrent claimers then queue on the busy timeout instead of racing.
    """

    @event.listens_for(engine, "connect")
    def _disable_pysqlite_begin(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def _serialize_shared_connection(engine: Engine) -> None:
    """
    StaticPool hands the same DBAPI connection to every session. Hold a lock from checkout to
    checkin so only one session at a time runs a transaction on it; checkin happens after the
    commit or rollback has reached SQLite.
    """
    lock = threading.RLock()

    @event.listens_for(engine, "checkout")
    def _acquire(dbapi_connection, connection_record, connection_proxy):
        lock.acquire()

    @event.listens_for(engine, "checkin")
    def _release(dbapi_connection, connection_record):
        lock.release()


def build_engine(url: str) -> Engine:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    connect_args = {"check_same_thread": False, "timeout": settings.sqlite_busy_timeout}
    if parsed.database in (None, "", ":memory:"):
        engine = create_engine(url, connect_args=connect_args, poolclass=StaticPool)
        _serialize_shared_connection(engine)
    else:
        engine = create_engine(url, connect_args=connect_args)

    _use_immediate_transactions(engine)
    return engine


engine = build_engine(DATABASE_URL)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()
