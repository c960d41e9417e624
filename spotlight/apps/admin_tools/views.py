import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from apps.core.listing import ListState
from apps.core.pagination import compact_window, showing_range
from apps.posts.models import Category, CommentStatus
from apps.posts.services import CommentService, PostService
from apps.stores.parking import classify_parking
from apps.stores.services import StoreService

from .forms import PostForm, StoreForm

logger = logging.getLogger(__name__)


def _page_sizes():
    return settings.SPOTLIGHT["ADMIN_PAGE_SIZES"]


def _list_state(params, categories=()):
    return ListState.from_query(params, page_sizes=_page_sizes(), categories=categories)


def _list_url(url_name, state):
    query = state.to_query(_page_sizes()[0])
    url = reverse(f"admin_tools:{url_name}")
    return f"{url}?{query}" if query else url


def _listing_context(request, state, result):
    """Pagination, range label and error state shared by every management table."""
    default_size = _page_sizes()[0]
    pagination = result.get("pagination")
    context = {
        "state": state,
        "page_sizes": _page_sizes(),
        "pagination": pagination,
        "error": None if result["success"] else result["error"],
        "retry_url": request.get_full_path(),
    }
    if not pagination:
        return context

    total = pagination["total_pages"]
    context["showing"] = showing_range(state.current_page, state.page_size, pagination["total_count"])

    def link(page):
        query = state.go_to_page(page, total).to_query(default_size)
        return {"number": page, "url": f"?{query}", "active": page == state.current_page}

    if total > 1:
        context["page_links"] = [link(n) for n in compact_window(state.current_page, total)]
        context["prev_link"] = link(state.current_page - 1) if pagination["has_prev_page"] else None
        context["next_link"] = link(state.current_page + 1) if pagination["has_next_page"] else None
    return context


def _report_failure(request, form, result):
    messages.error(request, result["error"])
    for field, errors in (result.get("errors") or {}).items():
        for error in errors:
            form.add_error(field if field in form.fields else None, str(error))


def _back_to_list(url_name, state, listing):
    """Redirect to the table, pulling the page back if it no longer exists."""
    if listing["success"]:
        state = state.go_to_page(state.current_page, listing["pagination"]["total_pages"])
    return redirect(_list_url(url_name, state))


# Stores

@staff_member_required
def stores_manage(request):
    state = _list_state(request.GET)
    result = StoreService.get_stores_paginated(**state.fetch_params())
    context = _listing_context(request, state, result)
    context["stores"] = [
        {**store, "parking_info": classify_parking(store["parking"])}
        for store in result.get("stores", [])
    ]
    return render(request, "admin_tools/stores_manage.html", context)


@staff_member_required
def store_add(request):
    form = StoreForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        result = StoreService.create_store(form.cleaned_data)
        if result["success"]:
            messages.success(request, result["message"])
            return redirect("admin_tools:stores_manage")
        if result["code"] == "conflict":
            form.add_error("store_id", result["error"])
        _report_failure(request, form, result)
    return render(request, "admin_tools/store_form.html", {"form": form, "title": "새 매장 추가"})


@staff_member_required
def store_edit(request, pk):
    current = StoreService.get_store(pk)
    if not current["success"]:
        messages.error(request, current["error"])
        return redirect("admin_tools:stores_manage")

    form = StoreForm(request.POST) if request.method == "POST" else StoreForm.from_store(current["store"])
    if request.method == "POST" and form.is_valid():
        result = StoreService.update_store(pk, form.cleaned_data)
        if result["success"]:
            messages.success(request, result["message"])
            return redirect("admin_tools:stores_manage")
        if result["code"] == "conflict":
            form.add_error("store_id", result["error"])
        _report_failure(request, form, result)
    return render(request, "admin_tools/store_form.html", {
        "form": form,
        "store": current["store"],
        "title": "매장 정보 수정",
    })


@staff_member_required
@require_POST
def store_delete(request, pk):
    state = _list_state(request.POST)
    result = StoreService.delete_store(pk)
    if result["success"]:
        logger.info("%s removed store %s", request.user, pk)
        messages.success(request, result["message"])
    else:
        messages.error(request, result["error"])
    listing = StoreService.get_stores_paginated(**{**state.fetch_params(), "page": 1})
    return _back_to_list("stores_manage", state, listing)


# Posts

@staff_member_required
def posts_manage(request):
    state = _list_state(request.GET, categories=Category.values)
    result = PostService.get_posts_paginated(**state.fetch_params())
    context = _listing_context(request, state, result)
    context["posts"] = result.get("posts", [])
    context["categories"] = Category.choices
    return render(request, "admin_tools/posts_manage.html", context)


@staff_member_required
def post_create(request):
    form = PostForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        result = PostService.create_post(form.payload())
        if result["success"]:
            messages.success(request, result["message"])
            return redirect("admin_tools:posts_manage")
        if result["code"] == "conflict":
            form.add_error("slug", result["error"])
        _report_failure(request, form, result)
    return render(request, "admin_tools/post_form.html", {"form": form, "title": "새 게시글 작성"})


@staff_member_required
def post_edit(request, pk):
    current = PostService.get_post(pk)
    if not current["success"]:
        messages.error(request, current["error"])
        return redirect("admin_tools:posts_manage")

    form = PostForm(request.POST) if request.method == "POST" else PostForm.from_post(current["post"])
    if request.method == "POST" and form.is_valid():
        result = PostService.update_post(pk, form.payload())
        if result["success"]:
            messages.success(request, result["message"])
            return redirect("admin_tools:posts_manage")
        if result["code"] == "conflict":
            form.add_error("slug", result["error"])
        _report_failure(request, form, result)
    return render(request, "admin_tools/post_form.html", {
        "form": form,
        "post": current["post"],
        "title": "게시글 수정",
    })


@staff_member_required
@require_POST
def post_delete(request, pk):
    state = _list_state(request.POST, categories=Category.values)
    result = PostService.delete_post(pk)
    if result["success"]:
        logger.info("%s removed post %s", request.user, pk)
        messages.success(request, result["message"])
    else:
        messages.error(request, result["error"])
    listing = PostService.get_posts_paginated(**{**state.fetch_params(), "page": 1})
    return _back_to_list("posts_manage", state, listing)


# Comments

@staff_member_required
def comments_manage(request):
    state = _list_state(request.GET)
    result = CommentService.get_comments_paginated(**state.fetch_params())
    context = _listing_context(request, state, result)
    comments = result.get("comments", [])
    context["comments"] = comments
    context["page_counts"] = {
        status.value: sum(1 for comment in comments if comment["status"] == status.value)
        for status in CommentStatus
    }
    totals = CommentService.get_comment_status_counts()
    context["total_counts"] = totals["counts"] if totals["success"] else None
    return render(request, "admin_tools/comments_manage.html", context)


def _change_comment_status(request, pk, change):
    state = _list_state(request.POST)
    result = change(pk)
    if result["success"]:
        messages.success(request, result["message"])
    else:
        messages.error(request, result["error"])
    return redirect(_list_url("comments_manage", state))


@staff_member_required
@require_POST
def comment_delete(request, pk):
    return _change_comment_status(request, pk, CommentService.delete_comment)


@staff_member_required
@require_POST
def comment_restore(request, pk):
    return _change_comment_status(request, pk, CommentService.restore_comment)
