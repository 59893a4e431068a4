from wallet_ledger.extensions import ma

class ResolvedTransactionSchema(ma.Schema):
    id = ma.String()
    type = ma.String()
    total = ma.Float()
    direction = ma.String()
    counterparty_type = ma.String()
    counterparty_name = ma.String(allow_none=True)
    counterparty_avatar = ma.String(allow_none=True)
    # null for internal counterparties
    counterparty_phone = ma.String(allow_none=True)
    created_at = ma.DateTime()

resolved_transactions_schema = ResolvedTransactionSchema(many=True)
