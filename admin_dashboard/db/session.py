from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from admin_dashboard.core.config import settings

# Pooled connections; stale ones are recycled before use.
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

# One session per request, closed by get_db.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
