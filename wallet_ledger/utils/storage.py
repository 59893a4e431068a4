import logging
from contextlib import contextmanager

from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)

from wallet_ledger.utils.exceptions import Transient

logger = logging.getLogger(__name__)

TRANSIENT_ERRORS = (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError)


@contextmanager
def storage_errors(session):
    """
    Roll the session back on any storage failure so its connection goes
    back to the pool clean. Connectivity and timeout failures surface as
    Transient; everything else propagates unchanged.
    """
    try:
        yield
    except TRANSIENT_ERRORS as e:
        session.rollback()
        logger.warning("Transient storage failure: %s", e)
        raise Transient(details={"reason": type(e).__name__}) from e
    except SQLAlchemyError:
        session.rollback()
        raise
