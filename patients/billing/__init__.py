from .base import BaseBillingClient
from .factory import get_billing_client
from .types import BillingAccount, BillingAccountRequest

__all__ = ['BaseBillingClient', 'BillingAccount', 'BillingAccountRequest', 'get_billing_client']
