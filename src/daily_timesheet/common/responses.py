from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify

from ..core.exceptions import BudgetRejection, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int, **extra):
    body = {"success": False, "message": message}
    body.update({k: v for k, v in extra.items() if v is not None})
    return jsonify(body), status


def json_errors(failure_message: str):
    """Map domain exceptions raised by a JSON view to 4xx responses.

    Anything else is logged and answered with ``failure_message`` and a 500.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except BudgetRejection as e:
                return error_response(str(e), 400, reason=e.reason.value, remainingHours=e.remaining_hours)
            except ValidationError as e:
                return error_response(str(e), 400)
            except NotFoundError as e:
                return error_response(str(e), 404)
            except Exception:
                logger.exception(failure_message)
                return error_response(failure_message, 500)

        return wrapper

    return decorator
