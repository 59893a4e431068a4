from wallet_ledger.extensions import db
from sqlalchemy.orm import validates
import uuid

PARTICIPANT_WALLET = "wallet"
PARTICIPANT_INTERNAL = "internal"
PARTICIPANT_TYPES = (PARTICIPANT_WALLET, PARTICIPANT_INTERNAL)

def gen_participant_id():
    return f"prt-{uuid.uuid4().hex[:12]}"

class Participant(db.Model):
    """
    One side of a ledger transaction.

    ``ref_id`` addresses a Wallet when ``type`` is "wallet" and an
    InternalAccount when ``type`` is "internal". It is a plain column, not a
    foreign key, because its target table depends on ``type``. Rows are
    append-only: ``type`` never changes once written.
    """

    __tablename__ = "participants"
    __table_args__ = (
        db.UniqueConstraint("type", "ref_id", name="uq_participants_type_ref"),
        db.CheckConstraint("type IN ('wallet', 'internal')", name="ck_participants_type"),
    )

    id = db.Column(db.String(50), primary_key=True, default=gen_participant_id)
    type = db.Column(db.String(20), nullable=False)
    ref_id = db.Column(db.String(50), nullable=False)

    @validates("type")
    def validate_type(self, key, value):
        if value not in PARTICIPANT_TYPES:
            raise ValueError(f"Unknown participant type: {value}")
        if self.type is not None and self.type != value:
            raise ValueError("Participant type cannot change")
        return value

    def __repr__(self):
        return f"<Participant {self.id} {self.type}:{self.ref_id}>"
