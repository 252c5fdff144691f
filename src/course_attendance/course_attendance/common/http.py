"""JSON responses, session identity and error mapping shared by the controllers."""

from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, request, session

from ..accounts.model import Requestor
from ..core.exceptions import (
    AuthorizationError,
    DomainError,
    EligibilityError,
    LocationRequiredError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def status_for(exc: DomainError) -> int:
    if isinstance(exc, (EligibilityError, LocationRequiredError, AuthorizationError)):
        return 403
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, ValidationError):
        return 400
    return 500


def current_requestor() -> Requestor:
    return Requestor(account_id=int(session["account_id"]), roles=frozenset(session.get("roles") or ()))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "account_id" not in session:
            return error_response("Please log in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def handle_domain_errors(view):
    """Domain errors become JSON with their status; anything else is logged as a 500."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            status = status_for(e)
            if status == 500:
                logger.exception("Internal domain error in %s", request.path)
                return error_response("Internal error", 500)
            return error_response(str(e), status)
        except Exception:
            logger.exception("Unexpected error in %s", request.path)
            return error_response("Internal error", 500)

    return wrapper
