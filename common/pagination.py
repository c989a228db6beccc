"""
Pagination utilities for the project.

Defines the default page number pagination class used across DRF
endpoints.  Clients pick a page with `?page=` and its size with
`?limit=` (capped at 100).
"""
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class DefaultPagination(PageNumberPagination):
    """A page number paginator with a default page size of 10."""
    page_size = 10
    page_query_param = "page"
    page_size_query_param = "limit"
    max_page_size = 100

    def get_paginated_data(self, data):
        """Envelope for a page of ``data`` without wrapping it in a Response."""
        return {
            "count": self.page.paginator.count,
            "page": self.page.number,
            "limit": self.page.paginator.per_page,
            "next": self.get_next_link(),
            "previous": self.get_previous_link(),
            "results": data,
        }

    def get_paginated_response(self, data):
        return Response(self.get_paginated_data(data))


def clamp_limit(raw, default=20, maximum=100):
    """Parse a ``?limit=`` value, falling back to ``default`` on junk input."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return max(1, min(value, maximum))
