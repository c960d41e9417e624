from rest_framework import permissions


class IsAdminUser(permissions.BasePermission):
    """
    Only staff accounts may manage stores, posts and comments.
    """

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_staff)


class IsAdminOrCreateOnly(permissions.BasePermission):
    """
    Anyone may POST (leave a comment); every other method needs staff.
    """

    def has_permission(self, request, view):
        if request.method == "POST":
            return True
        return bool(request.user and request.user.is_staff)


class IsAdminOrReadOnly(permissions.BasePermission):
    """
    Reads are public; writes need staff.
    """

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return bool(request.user and request.user.is_staff)
