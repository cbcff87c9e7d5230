"""
Billing 层的标准请求 / 响应结构。

所有 BillingClient 实现的 create_billing_account() 都返回 BillingAccount。
业务层（services.py）只认识这个格式，不知道背后走的是什么传输。
"""

from dataclasses import dataclass


@dataclass
class BillingAccountRequest:
    patient_id: str
    name: str
    email: str

    def to_payload(self) -> dict:
        return {
            'patientId': self.patient_id,
            'name': self.name,
            'email': self.email,
        }


@dataclass
class BillingAccount:
    account_id: str    # billing 服务分配的账户 ID，不透明
    status: str        # 例如 "ACTIVE"
