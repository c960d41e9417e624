import math
from collections import namedtuple

from django.core.exceptions import ValidationError
from django.core.paginator import Paginator

PageWindow = namedtuple(
    "PageWindow",
    ["pages", "show_first", "show_first_ellipsis", "show_last", "show_last_ellipsis"],
)


def parse_page_params(page, limit):
    """Coerce ``page``/``limit`` to positive ints or raise ``ValidationError``."""
    errors = {}
    parsed = {}
    for name, value in (("page", page), ("limit", limit)):
        try:
            number = int(value)
        except (TypeError, ValueError):
            errors[name] = ["정수를 입력해주세요."]
            continue
        if number < 1:
            errors[name] = ["1 이상이어야 합니다."]
            continue
        parsed[name] = number
    if errors:
        raise ValidationError(errors)
    return parsed["page"], parsed["limit"]


def pagination_meta(page, limit, total_count):
    total_pages = math.ceil(total_count / limit)
    return {
        "current_page": page,
        "total_pages": total_pages,
        "total_count": total_count,
        "limit": limit,
        "has_next_page": page < total_pages,
        "has_prev_page": page > 1,
    }


def paginate(queryset, page, limit):
    """Slice ``queryset`` for ``page`` and build the pagination metadata.

    Unlike ``Paginator.page`` a page past the end is not an error: it comes
    back empty with the real totals.
    """
    page, limit = parse_page_params(page, limit)
    paginator = Paginator(queryset, limit)
    meta = pagination_meta(page, limit, paginator.count)
    if page > meta["total_pages"]:
        return [], meta
    return list(paginator.page(page).object_list), meta


def page_window(current_page, total_pages, size=5):
    if total_pages < 1:
        return PageWindow([], False, False, False, False)
    start = max(1, min(current_page - 2, total_pages - (size - 1)))
    pages = [n for n in range(start, start + min(size, total_pages)) if n <= total_pages]
    return PageWindow(
        pages=pages,
        show_first=current_page > 3,
        show_first_ellipsis=current_page > 4,
        show_last=current_page < total_pages - 2,
        show_last_ellipsis=current_page < total_pages - 3,
    )


def compact_window(current_page, total_pages, radius=2):
    return list(range(max(1, current_page - radius), min(total_pages, current_page + radius) + 1))


def showing_range(current_page, page_size, total_count):
    if total_count <= 0:
        return None
    first = (current_page - 1) * page_size + 1
    if first > total_count:
        return None
    return first, min(current_page * page_size, total_count)
