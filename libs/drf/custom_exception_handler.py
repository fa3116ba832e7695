import logging

import sentry_sdk
from drf_standardized_errors.handler import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    """Standardized error body for every API error; server errors go to Sentry.

    Payroll domain errors are translated by the views before they get here,
    so anything left unhandled is a bug and is re-raised.
    """
    response = drf_exception_handler(exc, context)

    if response is None or response.status_code >= 500:
        view = context.get("view")
        logger.error("Unhandled API error in %s", type(view).__name__ if view else "unknown view", exc_info=exc)
        sentry_sdk.capture_exception(exc)

    if response is None:
        raise exc

    return response
