# backend/services/db_utils.py
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


def commit(db: Session, *refresh) -> None:
    """Commit the unit of work, refreshing the given rows; roll back on failure."""
    try:
        db.commit()
        for obj in refresh:
            db.refresh(obj)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Database commit failed")
        raise


def increment(db: Session, model, row_id: int, column: str, by: int = 1) -> None:
    """Single UPDATE ... SET col = col + n, no read-modify-write."""
    col = getattr(model, column)
    db.query(model).filter(model.id == row_id).update(
        {col: col + by}, synchronize_session=False
    )
