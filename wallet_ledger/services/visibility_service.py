import logging

from sqlalchemy import and_, case, func, or_, update

from wallet_ledger.models import Transaction
from wallet_ledger.services.history_service import find_viewer_participant_id
from wallet_ledger.utils.exceptions import Forbidden, NotFound
from wallet_ledger.utils.storage import storage_errors

logger = logging.getLogger(__name__)


def _stamp_if_side(side_column, deleted_column, participant_id):
    # keep an existing timestamp: deleting twice is a no-op
    return case(
        (and_(side_column == participant_id, deleted_column.is_(None)), func.now()),
        else_=deleted_column,
    )


class VisibilityService:
    def __init__(self, session):
        self.session = session

    def soft_delete(self, account_id, transaction_id):
        """
        Hide a transaction from ``account_id``'s history only.

        Raises NotFound when the transaction does not exist and Forbidden when
        the caller is neither its sender nor its receiver.
        """
        with storage_errors(self.session):
            participant_id = find_viewer_participant_id(self.session, account_id)

            matched = 0
            if participant_id is not None:
                stmt = (
                    update(Transaction)
                    .where(
                        Transaction.id == transaction_id,
                        or_(
                            Transaction.sender_participant_id == participant_id,
                            Transaction.receiver_participant_id == participant_id,
                        ),
                    )
                    .values(
                        deleted_for_sender_at=_stamp_if_side(
                            Transaction.sender_participant_id,
                            Transaction.deleted_for_sender_at,
                            participant_id,
                        ),
                        deleted_for_receiver_at=_stamp_if_side(
                            Transaction.receiver_participant_id,
                            Transaction.deleted_for_receiver_at,
                            participant_id,
                        ),
                    )
                    .execution_options(synchronize_session=False)
                )
                matched = self.session.execute(stmt).rowcount

            if matched:
                self.session.commit()
                logger.info("Transaction %s hidden for account %s", transaction_id, account_id)
                return

            self.session.rollback()
            exists = (
                self.session.query(Transaction.id)
                .filter(Transaction.id == transaction_id)
                .first()
            )

        if exists is None:
            raise NotFound("Transaction not found", details={"transaction_id": transaction_id})

        logger.warning(
            "Account %s tried to delete transaction %s it is not a party to",
            account_id,
            transaction_id,
        )
        raise Forbidden(
            "Transaction does not belong to this account",
            details={"transaction_id": transaction_id},
        )
