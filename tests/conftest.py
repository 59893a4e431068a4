from datetime import datetime
from decimal import Decimal

import pytest
from flask_jwt_extended import create_access_token

from wallet_ledger.main import create_app
from wallet_ledger.extensions import db
from wallet_ledger.models import (
    Account,
    InternalAccount,
    Participant,
    Profile,
    Transaction,
    Wallet,
    PARTICIPANT_INTERNAL,
    PARTICIPANT_WALLET,
)


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


class LedgerFactory:
    """Builds committed ledger rows for tests."""

    def account(self, full_name, phone=None, avatar=None):
        account = Account(password_hash="x")
        db.session.add(account)
        db.session.flush()

        db.session.add(Profile(id=account.id, full_name=full_name, phone=phone, avatar=avatar))
        wallet = Wallet(account_id=account.id, balance=Decimal("0.00"))
        db.session.add(wallet)
        db.session.flush()

        participant = Participant(type=PARTICIPANT_WALLET, ref_id=wallet.id)
        db.session.add(participant)
        db.session.commit()
        return account.id, participant.id

    def bare_account(self):
        account = Account(password_hash="x")
        db.session.add(account)
        db.session.flush()
        db.session.add(Profile(id=account.id, full_name="No Wallet"))
        db.session.commit()
        return account.id

    def internal(self, name, avatar=None):
        internal = InternalAccount(name=name, avatar=avatar)
        db.session.add(internal)
        db.session.flush()

        participant = Participant(type=PARTICIPANT_INTERNAL, ref_id=internal.id)
        db.session.add(participant)
        db.session.commit()
        return internal.id, participant.id

    def dangling(self, kind, ref_id="missing"):
        participant = Participant(type=kind, ref_id=ref_id)
        db.session.add(participant)
        db.session.commit()
        return participant.id

    def transaction(self, sender, receiver, total, created_at, tx_type="transfer"):
        tx = Transaction(
            sender_participant_id=sender,
            receiver_participant_id=receiver,
            total=Decimal(str(total)),
            type=tx_type,
            created_at=created_at,
        )
        db.session.add(tx)
        db.session.commit()
        return tx.id


@pytest.fixture
def ledger(app):
    return LedgerFactory()


@pytest.fixture
def auth_header(app):
    def make(account_id):
        token = create_access_token(identity=account_id)
        return {"Authorization": f"Bearer {token}"}
    return make


def at(text):
    return datetime.fromisoformat(text)
