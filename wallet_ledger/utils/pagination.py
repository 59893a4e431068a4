from wallet_ledger.utils.exceptions import ServiceError


def parse_page_args(args, default_limit, max_limit):
    """Read ?page=&limit= from a request, rejecting junk instead of guessing."""
    try:
        page = int(args.get("page", 1))
        limit = int(args.get("limit", default_limit))
    except (TypeError, ValueError):
        raise ServiceError("VALIDATION_ERROR", "page and limit must be integers")

    if page < 1 or limit < 1:
        raise ServiceError("VALIDATION_ERROR", "page and limit must be positive")
    return page, min(limit, max_limit)


def pagination_meta(total, page, limit):
    total_pages = (total + limit - 1) // limit
    return {"total": total, "page": page, "limit": limit, "total_pages": total_pages}
