# files_manager/models/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def create_session_factory(database_url: str) -> sessionmaker:
    """Build an engine for `database_url`, create the tables, return a session factory."""
    # Import models here to register them with Base
    from files_manager.models import file, user  # noqa: F401

    kwargs = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url == "sqlite://":
            # one shared connection, otherwise every thread sees an empty db
            kwargs["poolclass"] = StaticPool

    engine = create_engine(database_url, pool_pre_ping=True, **kwargs)
    Base.metadata.create_all(bind=engine)

    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
