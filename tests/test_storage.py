import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from wallet_ledger.utils.exceptions import ServiceError, Transient
from wallet_ledger.utils.storage import storage_errors


class FakeSession:
    def __init__(self):
        self.rollbacks = 0

    def rollback(self):
        self.rollbacks += 1


def test_connectivity_errors_become_transient():
    session = FakeSession()
    cause = OperationalError("SELECT 1", {}, Exception("server closed the connection"))

    with pytest.raises(Transient) as exc:
        with storage_errors(session):
            raise cause

    assert exc.value.__cause__ is cause
    assert exc.value.http_status == 503
    assert exc.value.details == {"reason": "OperationalError"}
    assert session.rollbacks == 1


def test_other_storage_errors_propagate_unchanged():
    session = FakeSession()

    with pytest.raises(IntegrityError):
        with storage_errors(session):
            raise IntegrityError("INSERT", {}, Exception("duplicate"))

    assert session.rollbacks == 1


def test_service_errors_pass_through_without_rollback():
    session = FakeSession()

    with pytest.raises(ServiceError):
        with storage_errors(session):
            raise ServiceError("NOT_FOUND", "nope")

    assert session.rollbacks == 0
