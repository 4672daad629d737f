from sqlalchemy.exc import IntegrityError

UNIQUE_VIOLATION = "23505"


def is_unique_violation(err: Exception) -> bool:
    """True when the error comes from a unique constraint (SQLSTATE 23505)."""
    if not isinstance(err, IntegrityError):
        return False

    orig = err.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is not None:
        return code == UNIQUE_VIOLATION

    # sqlite3 exposes no SQLSTATE, only the message
    return "UNIQUE constraint failed" in str(orig)
