import logging
from pathlib import Path

from alembic.config import Config
from alembic import command
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from social_app.db.base import Base
from social_app.db.session import engine

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"

def _alembic_config() -> Config:
    cfg = Config(str(ALEMBIC_INI))
    cfg.attributes["configure_logger"] = False
    return cfg

def init_db() -> None:
    """
    Initialize the database by running Alembic migrations.
    """
    try:
        command.upgrade(_alembic_config(), "head")
        logger.info("Database migrations applied successfully")
    except Exception as e:
        logger.error(f"Error applying database migrations: {e}")
        raise


def create_all_tables() -> bool:
    """
    Create missing tables from the models.

    A schema built from scratch is stamped with the latest Alembic revision
    so a later `init_db` does not replay the initial migration over it.
    """
    try:
        existing_tables = set(inspect(engine).get_table_names())

        Base.metadata.create_all(bind=engine)

        new_tables = set(inspect(engine).get_table_names()) - existing_tables
        if new_tables:
            logger.info(f"Created new tables: {new_tables}")

        if not existing_tables & set(Base.metadata.tables) and "alembic_version" not in existing_tables:
            command.stamp(_alembic_config(), "head")
            logger.info("Stamped new schema with the latest migration")

        return True
    except SQLAlchemyError as e:
        logger.error(f"Error creating database tables: {e}")
        return False


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    logger.info("Applying database migrations")
    init_db()
    logger.info("Database is up to date")
