"""
具体 BillingClient 实现。

已注册传输方式：
  http   — HttpBillingClient   (requests, POST {BILLING_SERVICE_URL}/billing-accounts)
  local  — LocalBillingClient  (进程内直接返回，开发 / 测试用)
"""

import logging
import uuid

import requests
from django.conf import settings

from ..exceptions import ProvisioningFailedError
from .base import BaseBillingClient
from .types import BillingAccount, BillingAccountRequest

logger = logging.getLogger(__name__)


# ── HttpBillingClient ──────────────────────────────────────────────────────
#
# 环境变量：BILLING_SERVICE_URL / BILLING_TIMEOUT_SECONDS
# 请求体：{"patientId": ..., "name": ..., "email": ...}
# 响应体：{"accountId": ..., "status": ...}

class HttpBillingClient(BaseBillingClient):

    PATH = "/billing-accounts"

    def __init__(self, base_url=None, timeout=None, session=None):
        self.base_url = (base_url or settings.BILLING_SERVICE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.BILLING_TIMEOUT_SECONDS
        # requests 默认的 HTTPAdapter 不重试，一次调用就是一次往返
        self.session = session or requests.Session()

    def create_billing_account(self, patient_id: str, name: str, email: str) -> BillingAccount:
        request = BillingAccountRequest(patient_id=patient_id, name=name, email=email)
        url = f"{self.base_url}{self.PATH}"

        logger.info("Provisioning billing account for patient %s at %s", patient_id, url)
        try:
            response = self.session.post(url, json=request.to_payload(), timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
            account = BillingAccount(account_id=str(body["accountId"]), status=str(body["status"]))
        except requests.Timeout as exc:
            logger.error("Billing call timed out after %ss for patient %s", self.timeout, patient_id)
            raise ProvisioningFailedError(
                detail={"patient_id": patient_id, "reason": "timeout"},
            ) from exc
        except (requests.RequestException, ValueError, KeyError, TypeError) as exc:
            logger.error("Billing call failed for patient %s: %s", patient_id, exc)
            raise ProvisioningFailedError(
                detail={"patient_id": patient_id, "reason": str(exc)},
            ) from exc

        logger.info("Billing account %s (%s) created for patient %s",
                    account.account_id, account.status, patient_id)
        return account


# ── LocalBillingClient ─────────────────────────────────────────────────────
#
# 不连任何服务，直接返回 ACTIVE 账户。没有 billing 服务的本地环境用。

class LocalBillingClient(BaseBillingClient):

    def create_billing_account(self, patient_id: str, name: str, email: str) -> BillingAccount:
        account = BillingAccount(
            account_id=f"ACC-{uuid.uuid4().hex[:8].upper()}",
            status="ACTIVE",
        )
        logger.debug("Local billing account %s for patient %s", account.account_id, patient_id)
        return account
