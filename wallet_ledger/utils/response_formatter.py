from flask import jsonify


def success_response(payload=None, message=None, status=200):
    body = {"success": True}
    if payload is not None:
        body.update(payload if isinstance(payload, dict) else {"data": payload})
    if message:
        body["message"] = message
    return jsonify(body), status


def error_response(code, message, details=None, status=400):
    return jsonify({
        "error": {
            "code": code,
            "message": message,
            "details": details or {},
        }
    }), status


def service_error_response(e):
    """Render a ServiceError with the status its class maps to."""
    return error_response(e.code, e.message, e.details, status=e.http_status)
