# db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from surveyhub.app.core.config import settings

is_sqlite = settings.DATABASE_URL.startswith("sqlite")
connect_args = {"check_same_thread": False} if is_sqlite else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args, pool_pre_ping=not is_sqlite)
LocalSession = sessionmaker(autoflush=False, bind=engine)


def get_db():
    """Request-scoped session; closed once the response is sent."""
    db = LocalSession()
    try:
        yield db
    finally:
        db.close()
