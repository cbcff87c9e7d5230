"""
BaseBillingClient — 所有 Billing 账户开通实现的抽象基类。

每个新传输方式只需：
1. 继承 BaseBillingClient
2. 实现 create_billing_account()
3. 在 factory.py 的 _build_registry 注册一行

services.py 完全不知道背后用哪种传输。
"""

from abc import ABC, abstractmethod

from .types import BillingAccount


class BaseBillingClient(ABC):

    @abstractmethod
    def create_billing_account(self, patient_id: str, name: str, email: str) -> BillingAccount:
        """
        为患者开通 billing 账户。阻塞调用，只尝试一次（不重试、无幂等键）。

        Returns:
            BillingAccount(account_id=..., status=...)

        Raises:
            ProvisioningFailedError: 网络错误、远端拒绝、超时都统一抛这个
        """
