import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import and_, func, or_

from wallet_ledger.models import Participant, Transaction, Wallet, PARTICIPANT_WALLET
from wallet_ledger.services.participant_resolver import ParticipantResolver
from wallet_ledger.utils.exceptions import NotFound
from wallet_ledger.utils.storage import storage_errors

logger = logging.getLogger(__name__)

DIRECTION_DEBIT = "debit"
DIRECTION_CREDIT = "credit"


@dataclass(frozen=True)
class ResolvedTransaction:
    id: str
    type: str
    total: Decimal
    direction: str
    counterparty_type: str
    counterparty_name: Optional[str]
    counterparty_avatar: Optional[str]
    counterparty_phone: Optional[str]
    created_at: datetime


def find_viewer_participant_id(session, account_id):
    """The wallet participant owned by ``account_id``, or None if it has no wallet."""
    return (
        session.query(Participant.id)
        .join(Wallet, Wallet.id == Participant.ref_id)
        .filter(
            Participant.type == PARTICIPANT_WALLET,
            Wallet.account_id == account_id,
        )
        .scalar()
    )


class HistoryService:
    """Viewer-relative, visibility-filtered transaction history."""

    def __init__(self, session, resolver=None):
        self.session = session
        self.resolver = resolver or ParticipantResolver(session)

    def viewer_participant_id(self, account_id):
        with storage_errors(self.session):
            return find_viewer_participant_id(self.session, account_id)

    def _visible_to(self, participant_id):
        # a row drops out only for the side that deleted it
        return self.session.query(Transaction).filter(
            or_(
                and_(
                    Transaction.sender_participant_id == participant_id,
                    Transaction.deleted_for_sender_at.is_(None),
                ),
                and_(
                    Transaction.receiver_participant_id == participant_id,
                    Transaction.deleted_for_receiver_at.is_(None),
                ),
            )
        )

    def count_history(self, account_id):
        participant_id = self.viewer_participant_id(account_id)
        if participant_id is None:
            return 0
        with storage_errors(self.session):
            return self._visible_to(participant_id).order_by(None).count()

    def get_history(self, account_id, page=None, limit=None):
        """
        Transactions ``account_id`` took part in, newest day first and newest
        first within a day, each labelled debit/credit from the viewer's side
        and carrying the resolved counterparty.

        Without ``limit`` the whole history is returned. An account with no
        wallet participant has an empty history.
        """
        participant_id = self.viewer_participant_id(account_id)
        if participant_id is None:
            return []

        with storage_errors(self.session):
            q = self._visible_to(participant_id).order_by(
                func.date(Transaction.created_at).desc(),
                Transaction.created_at.desc(),
                Transaction.id.desc(),
            )
            if limit:
                q = q.offset((max(page or 1, 1) - 1) * limit).limit(limit)
            rows = q.all()

        if not rows:
            return []

        counterparty_of = {
            tx.id: (
                tx.receiver_participant_id
                if tx.sender_participant_id == participant_id
                else tx.sender_participant_id
            )
            for tx in rows
        }

        try:
            counterparties = self.resolver.resolve_many(set(counterparty_of.values()))
        except NotFound as e:
            broken = set(e.details.get("participant_ids", []))
            logger.error(
                "History for account %s has unresolvable counterparties in transactions %s",
                account_id,
                sorted(tx_id for tx_id, cp in counterparty_of.items() if cp in broken),
            )
            raise

        history = []
        for tx in rows:
            counterparty = counterparties[counterparty_of[tx.id]]
            history.append(ResolvedTransaction(
                id=tx.id,
                type=tx.type,
                total=tx.total,
                direction=(
                    DIRECTION_DEBIT
                    if tx.sender_participant_id == participant_id
                    else DIRECTION_CREDIT
                ),
                counterparty_type=counterparty.type,
                counterparty_name=counterparty.identity.name,
                counterparty_avatar=counterparty.identity.avatar,
                counterparty_phone=counterparty.identity.phone,
                created_at=tx.created_at,
            ))
        return history
