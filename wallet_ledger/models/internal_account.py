from wallet_ledger.extensions import db
from sqlalchemy.sql import func
import uuid

def gen_internal_id():
    return f"int-{uuid.uuid4().hex[:12]}"

class InternalAccount(db.Model):
    """System or merchant counterparty. Has a display name and avatar, never a phone."""

    __tablename__ = "internal_accounts"

    id = db.Column(db.String(50), primary_key=True, default=gen_internal_id)
    name = db.Column(db.String(255), nullable=False)
    avatar = db.Column(db.String(1024))

    created_at = db.Column(db.DateTime, server_default=func.now())
