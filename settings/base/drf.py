from .base import config

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_FILTER_BACKENDS": [
        "django_filters.rest_framework.DjangoFilterBackend",
        "rest_framework.filters.OrderingFilter",
    ],
    "DEFAULT_PAGINATION_CLASS": "libs.pagination.PageNumberWithSizePagination",
    "PAGE_SIZE": 25,
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "EXCEPTION_HANDLER": "libs.drf.custom_exception_handler.exception_handler",
    "COERCE_DECIMAL_TO_STRING": False,
}

# drf-spectacular settings
SPECTACULAR_SETTINGS = {
    "TITLE": "Branch Payroll Backend API",
    "DESCRIPTION": "API documentation for the multi-branch microfinance payroll system",
    "VERSION": config("API_DOC_VERSION", default="1.0.0"),
    "SERVE_INCLUDE_SCHEMA": False,
    "COMPONENT_SPLIT_REQUEST": True,
    "SCHEMA_PATH_PREFIX": "/api/",
}
