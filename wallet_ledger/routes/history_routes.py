from flask import Blueprint, request, current_app
from flask_jwt_extended import jwt_required, get_jwt_identity

from wallet_ledger.extensions import db
from wallet_ledger.schemas.transaction_schema import resolved_transactions_schema
from wallet_ledger.services.history_service import HistoryService
from wallet_ledger.services.visibility_service import VisibilityService
from wallet_ledger.utils.pagination import parse_page_args, pagination_meta
from wallet_ledger.utils.response_formatter import success_response

bp = Blueprint("history", __name__, url_prefix="/api/v1/users")


@bp.route("/transactions", methods=["GET"])
@jwt_required()
def transaction_history():
    uid = get_jwt_identity()
    page, limit = parse_page_args(
        request.args,
        current_app.config["HISTORY_DEFAULT_LIMIT"],
        current_app.config["HISTORY_MAX_LIMIT"],
    )

    service = HistoryService(db.session)
    total = service.count_history(uid)
    items = service.get_history(uid, page=page, limit=limit)

    return success_response({
        "transactions": resolved_transactions_schema.dump(items),
        "pagination": pagination_meta(total, page, limit),
    })


@bp.route("/transactions/<tx_id>", methods=["DELETE"])
@jwt_required()
def delete_transaction(tx_id):
    uid = get_jwt_identity()
    VisibilityService(db.session).soft_delete(uid, tx_id)
    current_app.logger.debug("History entry %s removed by %s", tx_id, uid)
    return success_response(message="Transaction removed from history")
