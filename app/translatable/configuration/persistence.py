"""Persistence settings."""

from pydantic import Field

from translatable.configuration.base import ComponentSettings


class PersistenceSettings(ComponentSettings):
    """Storage configuration for the bundled record stores.

    Environment Variables:
        DATABASE_URL: SQLAlchemy URL for SQLAlchemyRecordStore
            (default: in-memory SQLite)
        PERSISTENCE_ECHO_SQL: Echo emitted SQL (default: False)
        PERSISTENCE_USE_TRANSACTIONS: Wrap each save in the store's
            transaction primitive when it has one (default: True)

    Example:
        ```python
        from translatable.configuration import get_settings

        settings = get_settings()
        engine = create_engine(settings.persistence.database_url)
        ```
    """

    database_url: str = Field(
        default="sqlite://",
        alias="DATABASE_URL",
        description="SQLAlchemy database URL",
    )
    echo_sql: bool = Field(
        default=False,
        alias="PERSISTENCE_ECHO_SQL",
        description="Log SQL statements emitted by the engine",
    )
    use_transactions: bool = Field(
        default=True,
        alias="PERSISTENCE_USE_TRANSACTIONS",
        description="Run save() inside the store's transaction when available",
    )
