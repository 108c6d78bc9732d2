# calmmind/system/reset_db.py
import logging

from calmmind.core.config import load_settings
from calmmind.core.database import Base, make_engine

logger = logging.getLogger(__name__)


def reset_database(database_url: str) -> None:
    """Drops and recreates every table. All stored records are lost."""
    engine = make_engine(database_url)
    logger.warning("Dropping all tables...")
    Base.metadata.drop_all(bind=engine)

    logger.info("Recreating tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables recreated successfully.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    settings = load_settings()
    if not settings.database_url:
        raise SystemExit("DATABASE_URL must be set to reset the database")
    reset_database(settings.database_url)
