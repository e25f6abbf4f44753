from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.config import config

engine = create_engine(config.SQLALCHEMY_DATABASE_URI)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for all models
Base = declarative_base()


@contextmanager
def transactional(db: Session):
    """
    Commit the work done inside the block, or roll it back and re-raise.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
