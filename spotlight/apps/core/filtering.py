from django.core.exceptions import ValidationError


def filter_queryset(filterset_class, data, queryset):
    """Apply ``filterset_class`` to ``queryset``; bad filter values are a validation failure."""
    data = {key: value for key, value in data.items() if value not in (None, '')}
    filterset = filterset_class(data, queryset=queryset)
    if not filterset.is_valid():
        raise ValidationError({
            field: [str(message) for message in messages]
            for field, messages in filterset.errors.items()
        })
    return filterset.qs
