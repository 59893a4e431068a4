from wallet_ledger.extensions import db
from sqlalchemy.sql import func
import uuid

def gen_account_id():
    return f"acc-{uuid.uuid4().hex[:12]}"

class Account(db.Model):
    __tablename__ = "accounts"

    id = db.Column(db.String(50), primary_key=True, default=gen_account_id)
    # owned by the auth service; never read here
    password_hash = db.Column(db.String(255), nullable=False)

    created_at = db.Column(db.DateTime, server_default=func.now())
    updated_at = db.Column(db.DateTime, onupdate=func.now())
