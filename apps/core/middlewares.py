import json

from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin
from rest_framework.response import Response

UNWRAPPED_PATHS = ("/docs/", "/schema/")


class ApiResponseWrapperMiddleware(MiddlewareMixin):
    """
    Middleware to wrap API responses in a consistent format.

    Success responses: {"success": true, "data": {...}, "error": null}
    Error responses: {"success": false, "data": null, "error": {...}}
    """

    def process_response(self, request, response):
        if request.path in UNWRAPPED_PATHS or not request.path.startswith("/api/"):
            return response

        if isinstance(response, Response):
            status = response.status_code
            data = response.data if response.data is not None else None
        elif isinstance(response, JsonResponse):
            status = response.status_code
            data = json.loads(response.content)
        else:
            # Do not wrap non-JSON responses
            return response

        is_error = getattr(response, "exception", False) or status >= 400
        envelope = {
            "success": not is_error,
            "data": None if is_error else data,
            "error": data if is_error else None,
        }
        return JsonResponse(envelope, status=status)
