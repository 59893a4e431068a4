from wallet_ledger.extensions import db
from sqlalchemy.sql import func
import uuid

def gen_tx_id():
    return f"tx_{uuid.uuid4().hex[:12]}"

class Transaction(db.Model):
    """
    Committed ledger event between two participants.

    Only the two ``deleted_for_*_at`` columns are ever updated after insert,
    each by the party on that side.
    """

    __tablename__ = "transactions"
    __table_args__ = (
        db.CheckConstraint("total > 0", name="ck_transactions_total_positive"),
        db.CheckConstraint(
            "sender_participant_id <> receiver_participant_id",
            name="ck_transactions_distinct_parties",
        ),
    )

    id = db.Column(db.String(50), primary_key=True, default=gen_tx_id)
    sender_participant_id = db.Column(
        db.String(50), db.ForeignKey("participants.id"), nullable=False, index=True
    )
    receiver_participant_id = db.Column(
        db.String(50), db.ForeignKey("participants.id"), nullable=False, index=True
    )

    type = db.Column(db.String(50), nullable=False)
    total = db.Column(db.Numeric(12, 2), nullable=False)

    created_at = db.Column(db.DateTime, server_default=func.now(), nullable=False)
    deleted_for_sender_at = db.Column(db.DateTime, nullable=True)
    deleted_for_receiver_at = db.Column(db.DateTime, nullable=True)

    sender = db.relationship("Participant", foreign_keys=[sender_participant_id])
    receiver = db.relationship("Participant", foreign_keys=[receiver_participant_id])
