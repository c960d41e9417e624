from django.conf import settings
from django.contrib import messages
from django.http import Http404, JsonResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_http_methods, require_POST

from apps.core.listing import ALL_CATEGORIES, ListState
from apps.core.pagination import page_window
from apps.core.results import http_status
from apps.stores.parking import classify_parking

from .models import Category
from .services import CommentService, PostService

PAGE_TITLES = {
    ALL_CATEGORIES: "스타벅스 매장 탐방",
    Category.DOMESTIC: "국내 스타벅스",
    Category.OVERSEAS: "해외 스타벅스",
    Category.SPECIAL: "특별한 스타벅스",
}


def _wants_json(request):
    return (
        request.headers.get('x-requested-with') == 'XMLHttpRequest'
        or request.GET.get('format') == 'json'
        or request.GET.get('partial') == '1'
    )


def _page_link(state, page, total_pages, default_page_size):
    query = state.go_to_page(page, total_pages).to_query(default_page_size)
    return {"number": page, "url": f"?{query}", "active": page == state.current_page}


def _category_options(state, counts, default_page_size):
    options = [{
        "value": ALL_CATEGORIES,
        "label": "전체",
        "count": sum(counts.values()),
        "url": f"?{state.set_category(ALL_CATEGORIES).to_query(default_page_size)}",
        "active": state.category == ALL_CATEGORIES,
    }]
    for category in Category:
        options.append({
            "value": category.value,
            "label": category.label,
            "count": counts.get(category.value, 0),
            "url": f"?{state.set_category(category.value).to_query(default_page_size)}",
            "active": state.category == category.value,
        })
    return options


@require_http_methods(["GET"])
def post_list(request):
    page_size = settings.SPOTLIGHT["PUBLIC_PAGE_SIZE"]
    state = ListState.from_query(request.GET, page_sizes=(page_size,), categories=Category.values)

    result = PostService.get_published_posts(**state.fetch_params())
    counts_result = PostService.get_post_counts_by_category()
    counts = counts_result["counts"] if counts_result["success"] else {}

    if _wants_json(request):
        return JsonResponse({**result, "counts": counts}, status=http_status(result))

    pagination = result.get("pagination")
    context = {
        "title": PAGE_TITLES.get(state.category, PAGE_TITLES[ALL_CATEGORIES]),
        "state": state,
        "posts": [_with_parking(post) for post in result.get("posts", [])],
        "pagination": pagination,
        "error": None if result["success"] else result["error"],
        "category_options": _category_options(state, counts, page_size),
        "has_filters": bool(state.debounced_search_term) or state.category != ALL_CATEGORIES,
    }
    if pagination and pagination["total_pages"] > 1:
        total = pagination["total_pages"]
        window = page_window(state.current_page, total)
        context.update({
            "window": window,
            "page_links": [_page_link(state, n, total, page_size) for n in window.pages],
            "first_link": _page_link(state, 1, total, page_size),
            "last_link": _page_link(state, total, total, page_size),
            "prev_link": _page_link(state, state.current_page - 1, total, page_size) if pagination["has_prev_page"] else None,
            "next_link": _page_link(state, state.current_page + 1, total, page_size) if pagination["has_next_page"] else None,
        })
    return render(request, "posts/post_list.html", context)


def _with_parking(post):
    store = post.get("store") or {}
    tags = store.get("tags", [])
    return {
        **post,
        "parking": classify_parking(store.get("parking")),
        "shown_tags": tags[:3],
        "hidden_tag_count": max(len(tags) - 3, 0),
    }


@require_http_methods(["GET"])
def post_detail(request, slug):
    result = PostService.get_post_by_slug(slug)
    if not result["success"]:
        if _wants_json(request):
            return JsonResponse(result, status=http_status(result))
        raise Http404(result["error"])
    post = dict(result["post"])
    counted = PostService.increment_post_views(post["id"])
    if counted["success"]:
        post["num_views"] = counted["num_views"]
    comments = CommentService.get_post_comments(post["id"])

    if _wants_json(request):
        return JsonResponse({"success": True, "post": post, "comments": comments.get("comments", [])})

    store = post.get("store")
    return render(request, "posts/post_detail.html", {
        "post": post,
        "category_label": Category(post["category"]).label,
        "store": store,
        "parking": classify_parking(store["parking"]) if store else None,
        "comments": comments.get("comments", []),
        "comments_error": None if comments["success"] else comments["error"],
    })


@require_POST
def comment_create(request, slug):
    post_result = PostService.get_post_by_slug(slug)
    if not post_result["success"]:
        raise Http404(post_result["error"])
    result = CommentService.create_comment({
        "post_id": post_result["post"]["id"],
        "author": request.POST.get("author", ""),
        "content": request.POST.get("content", ""),
        "email": request.POST.get("email") or None,
    })
    if _wants_json(request):
        return JsonResponse(result, status=http_status(result, success_status=201))
    if result["success"]:
        messages.success(request, result["message"])
    else:
        messages.error(request, result["error"])
        for field, errors in (result.get("errors") or {}).items():
            for error in errors:
                messages.error(request, f"{field}: {error}")
    return redirect(reverse("post_detail", args=[slug]) + "#comments")


@require_POST
def post_like(request, slug):
    post_result = PostService.get_post_by_slug(slug)
    if not post_result["success"]:
        return JsonResponse(post_result, status=http_status(post_result))
    result = PostService.like_post(post_result["post"]["id"])
    if _wants_json(request):
        return JsonResponse(result, status=http_status(result))
    if not result["success"]:
        messages.error(request, result["error"])
    return redirect("post_detail", slug=slug)
