"""Pagination for the list endpoints."""

from rest_framework.pagination import PageNumberPagination


class PageNumberWithSizePagination(PageNumberPagination):
    """
    Page number pagination with a client-chosen page size.

    Applies to salary sheets, ledger records, account openings and commission
    tiers. Salary rows and reports are returned as one list since a sheet is
    always read as a whole grid.

    Query Parameters:
        - page: Page number (default: 1)
        - page_size: Number of items per page (default: 25, max: 200)

    Example:
        GET /api/payroll/collection-records/?month=2025-01&page_size=200
    """

    page_size_query_param = "page_size"
    max_page_size = 200
