import functools
import logging

from django.core.exceptions import ValidationError
from rest_framework import serializers

from .exceptions import ActionError

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "입력 데이터가 올바르지 않습니다."

CODE_INVALID = "invalid"
CODE_ERROR = "error"

STATUS_BY_CODE = {
    CODE_INVALID: 400,
    "not_found": 404,
    "conflict": 409,
    CODE_ERROR: 500,
}


def ok(**payload):
    return {"success": True, **payload}


def fail(error, code=CODE_ERROR, **extra):
    return {"success": False, "error": error, "code": code, **extra}


def http_status(result, success_status=200):
    if result.get("success"):
        return success_status
    return STATUS_BY_CODE.get(result.get("code"), 500)


def _validation_details(exc):
    if isinstance(exc, serializers.ValidationError):
        return exc.detail
    if hasattr(exc, "message_dict"):
        return exc.message_dict
    return {"non_field_errors": exc.messages}


def action(default_error):
    """Run a service call and fold every failure into a result dict.

    Validation problems become ``invalid``, :class:`ActionError` subclasses
    keep their own code and message, anything else is logged and reported
    with ``default_error``.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (ValidationError, serializers.ValidationError) as exc:
                details = _validation_details(exc)
                logger.info("%s rejected input: %s", func.__qualname__, details)
                return fail(INVALID_INPUT_MESSAGE, code=CODE_INVALID, errors=details)
            except ActionError as exc:
                logger.info("%s failed: %s", func.__qualname__, exc.message)
                return fail(exc.message, code=exc.code)
            except Exception:
                logger.exception("%s failed", func.__qualname__)
                return fail(default_error)

        return wrapper

    return decorator
