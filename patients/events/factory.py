"""
工厂函数：根据 settings.EVENT_PUBLISHER_BACKEND 返回对应的 EventPublisher。
"""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .base import BaseEventPublisher


def _build_registry() -> dict[str, type[BaseEventPublisher]]:
    from .publishers import CeleryEventPublisher, NullEventPublisher

    return {
        "celery": CeleryEventPublisher,
        "null":   NullEventPublisher,
    }


def get_event_publisher() -> BaseEventPublisher:
    """
    Raises:
        ImproperlyConfigured: EVENT_PUBLISHER_BACKEND 未知
    """
    backend = getattr(settings, "EVENT_PUBLISHER_BACKEND", "celery")
    registry = _build_registry()
    publisher_cls = registry.get(backend)

    if publisher_cls is None:
        raise ImproperlyConfigured(
            f"Unknown EVENT_PUBLISHER_BACKEND: {backend!r}. "
            f"Known backends: {list(registry.keys())}"
        )

    return publisher_cls()
