from wallet_ledger.extensions import db
from sqlalchemy.sql import func

class Profile(db.Model):
    __tablename__ = "profiles"

    id = db.Column(db.String(50), db.ForeignKey("accounts.id"), primary_key=True)
    full_name = db.Column(db.String(255))
    phone = db.Column(db.String(32))
    avatar = db.Column(db.String(1024))
    is_verified = db.Column(db.Boolean, default=False, nullable=False)

    updated_at = db.Column(db.DateTime, onupdate=func.now())

    account = db.relationship("Account", backref=db.backref("profile", uselist=False))
