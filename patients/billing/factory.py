"""
工厂函数：根据 settings.BILLING_BACKEND 返回对应的 BillingClient 实例。

每个 backend 在进程内只创建一次（HttpBillingClient 持有 requests.Session，
复用连接池，避免每个请求都新建一个不关闭的 Session）。

新增传输方式只需：
  1. 在 clients.py 新建 XxxBillingClient(BaseBillingClient) 类
  2. 在此处 _build_registry 加一行
  不需要修改 services.py。
"""

from functools import lru_cache

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .base import BaseBillingClient


def _build_registry() -> dict[str, type[BaseBillingClient]]:
    from .clients import HttpBillingClient, LocalBillingClient

    return {
        "http":  HttpBillingClient,
        "local": LocalBillingClient,
    }


@lru_cache(maxsize=None)
def _client_for(backend: str) -> BaseBillingClient:
    registry = _build_registry()
    client_cls = registry.get(backend)

    if client_cls is None:
        raise ImproperlyConfigured(
            f"Unknown BILLING_BACKEND: {backend!r}. "
            f"Known backends: {list(registry.keys())}"
        )

    return client_cls()


def get_billing_client() -> BaseBillingClient:
    """
    从 settings.BILLING_BACKEND 读取传输方式，返回该 backend 在本进程内共享的 BillingClient。

    Raises:
        ImproperlyConfigured: BILLING_BACKEND 未知
    """
    return _client_for(getattr(settings, "BILLING_BACKEND", "http"))


def reset_billing_client() -> None:
    """丢弃缓存的 client（测试修改 BILLING_* 配置后调用）。"""
    _client_for.cache_clear()
