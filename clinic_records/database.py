"""
Database connection and session management.
Provides SQLAlchemy engine construction, session factories, and the base class for models.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

# Create base class for declarative models
Base = declarative_base()

def create_db_engine(database_url: str) -> Engine:
    """
    Create a SQLAlchemy engine for the given URL.
    
    In-memory SQLite databases share a single connection so every table
    sees the same data from any thread.
    
    Args:
        database_url: SQLAlchemy connection string
        
    Returns:
        Engine: Configured engine
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)
    return create_engine(database_url)

def create_session_factory(engine: Engine) -> sessionmaker:
    """
    Create a session factory bound to the engine and make sure every record table exists.
    
    Args:
        engine: SQLAlchemy engine
        
    Returns:
        sessionmaker: Session factory producing short-lived sessions
    """
    # Import all models here so their tables are registered on Base
    from .patients import models as _patients  # noqa: F401
    from .doctors import models as _doctors  # noqa: F401
    from .health_records import models as _health_records  # noqa: F401
    from .prescriptions import models as _prescriptions  # noqa: F401
    from .lab_tests import models as _lab_tests  # noqa: F401

    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
