# shawarma_shop/db.py
from sqlmodel import SQLModel, create_engine
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

# Models (import only: registers the tables on SQLModel.metadata)
from .models import Product, Order  # noqa: F401
from .config import CONFIG

# ---- Engine ----
def make_engine(url: str):
    is_sqlite = url.startswith("sqlite")
    in_memory = is_sqlite and (url in ("sqlite://", "sqlite:///:memory:"))

    if in_memory:
        # one shared connection, otherwise every session sees an empty DB
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    connect_args = {"check_same_thread": False, "timeout": 30} if is_sqlite else {}
    kwargs = {}
    if not is_sqlite:
        kwargs = dict(pool_size=10, max_overflow=20, pool_timeout=10, pool_recycle=1800)

    eng = create_engine(
        url,
        echo=False,
        connect_args=connect_args,
        pool_pre_ping=True,
        **kwargs,
    )

    if is_sqlite:
        @event.listens_for(eng, "connect")
        def set_sqlite_pragmas(dbapi_connection, connection_record):
            cur = dbapi_connection.cursor()
            # WAL lets the realtime readers run alongside a writer
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA busy_timeout=30000;")
            cur.close()

    return eng


engine = make_engine(CONFIG.store.db_url)

# ---- Schema ----
def create_db_and_tables(eng=None):
    SQLModel.metadata.create_all(eng or engine)

