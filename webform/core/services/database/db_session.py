"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import text
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from webform.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig, environment: str = "development"):
        """Create the process-wide engine and its connection pool."""

        self._config = db_config
        self._environment = environment

        logger.info("Configuring database engine for environment: {}", environment)
        engine_kwargs: dict[str, Any] = {
            "echo": False,
            "echo_pool": False,
            "connect_args": self._get_connect_args(),
        }

        if db_config.is_sqlite:
            if ":memory:" in db_config.connection_string or db_config.connection_string in (
                "sqlite://",
                "sqlite+pysqlite://",
            ):
                # One shared connection, otherwise every checkout sees an empty database
                engine_kwargs["poolclass"] = StaticPool
            if environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider MySQL for better performance and reliability."
                )
        else:
            engine_kwargs.update(
                {
                    "pool_size": db_config.pool_size,
                    "max_overflow": db_config.max_overflow,
                    "pool_timeout": db_config.pool_timeout,
                    "pool_recycle": db_config.pool_recycle,
                    "pool_pre_ping": True,  # Validate connections before use
                }
            )

        logger.info(
            "Initializing database engine using connection string: {}",
            db_config.safe_connection_string,
        )
        self._engine = create_engine(db_config.connection_string, **engine_kwargs)

        if environment == "production":
            logger.bind(
                pool_size=db_config.pool_size,
                max_overflow=db_config.max_overflow,
                pool_timeout=db_config.pool_timeout,
                pool_recycle=db_config.pool_recycle,
            ).info("Database engine initialized")

    @property
    def engine(self):
        return self._engine

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    def _get_connect_args(self) -> dict:
        """Get driver-specific connection arguments."""
        if self._config.is_sqlite:
            return {"check_same_thread": False, "timeout": 20}

        if "mysql" in self._config.driver:
            return {
                "connect_timeout": self._config.connect_timeout,
                "charset": "utf8mb4",
            }

        return {}

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for repositories and tests."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).error("Database transaction failed")
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).error("Database health check failed")
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    def dispose(self) -> None:
        """Close every pooled connection. Called once at process shutdown."""
        logger.info("Disposing database engine")
        self._engine.dispose()
