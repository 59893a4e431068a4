from wallet_ledger.extensions import db
from sqlalchemy.sql import func
import uuid

def gen_wallet_id():
    return f"wal_{uuid.uuid4().hex[:12]}"

class Wallet(db.Model):
    __tablename__ = "wallets"

    id = db.Column(db.String(50), primary_key=True, default=gen_wallet_id)
    account_id = db.Column(db.String(50), db.ForeignKey("accounts.id"), unique=True, nullable=False)

    balance = db.Column(db.Numeric(12, 2), default=0)
    currency = db.Column(db.String(10), default="USD")

    created_at = db.Column(db.DateTime, server_default=func.now())
    updated_at = db.Column(db.DateTime, onupdate=func.now())

    account = db.relationship("Account", backref=db.backref("wallet", uselist=False))
