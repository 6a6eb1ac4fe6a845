"""Error classifier for storage exceptions.

Converts SQLAlchemy exceptions raised while persisting records into
standardized OperationResult objects, so stores can report failures
instead of raising.

Usage:
    from translatable.operations.classifiers import classify_persistence_error

    try:
        connection.execute(statement)
    except SQLAlchemyError as exc:
        return classify_persistence_error(exc)
"""

from sqlalchemy import exc as sa_exc

from translatable.operations.result import OperationResult


def classify_persistence_error(exc: Exception) -> OperationResult:
    """Classify a storage exception into an OperationResult.

    Mapping:
    - IntegrityError: Constraint violation → PERMANENT_ERROR
    - DataError: Value rejected by the database → PERMANENT_ERROR
    - OperationalError / TimeoutError / DisconnectionError: → TRANSIENT_ERROR
    - Other SQLAlchemyError: → PERMANENT_ERROR
    - Non-SQLAlchemy exception: → PERMANENT_ERROR

    Args:
        exc: Exception raised by the storage layer

    Returns:
        OperationResult with appropriate status, message and error_code
    """
    if isinstance(exc, sa_exc.IntegrityError):
        return OperationResult.permanent_error(
            f"Constraint violation: {exc.orig}",
            error_code="INTEGRITY_ERROR",
        )

    if isinstance(exc, sa_exc.DataError):
        return OperationResult.permanent_error(
            f"Invalid data: {exc.orig}",
            error_code="DATA_ERROR",
        )

    if isinstance(
        exc,
        (sa_exc.OperationalError, sa_exc.TimeoutError, sa_exc.DisconnectionError),
    ):
        return OperationResult.transient_error(
            f"Database unavailable: {type(exc).__name__}: {str(exc)}",
            error_code="DATABASE_UNAVAILABLE",
        )

    if isinstance(exc, sa_exc.SQLAlchemyError):
        return OperationResult.permanent_error(
            f"Database error: {type(exc).__name__}: {str(exc)}",
            error_code="DATABASE_ERROR",
        )

    return OperationResult.permanent_error(
        f"Unexpected storage error: {type(exc).__name__}: {str(exc)}",
        error_code="UNKNOWN_ERROR",
    )
