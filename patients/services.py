"""
Patient service - 写路径编排。

create_patient 的顺序固定：
  1. 邮箱唯一性预检查（快速失败）
  2. 写库（唯一索引兜底并发）
  3. 同步开通 billing 账户（阻塞，只试一次）
  4. 发布 PATIENT_CREATED 事件（fire-and-forget）

第 3 步失败时 **不回滚** 第 2 步：记录已提交，请求返回 ProvisioningFailedError。
update / delete 不触发 billing 和事件。
"""

import logging

from .billing import BaseBillingClient, get_billing_client
from .events import BaseEventPublisher, PatientEvent, get_event_publisher
from .exceptions import EmailAlreadyExistsError, PatientNotFoundError, ProvisioningFailedError
from .repository import PatientRepository

logger = logging.getLogger(__name__)


class PatientService:
    """Stateless between calls; all per-request state stays local to the method."""

    def __init__(
        self,
        repository: PatientRepository,
        billing_client: BaseBillingClient,
        event_publisher: BaseEventPublisher,
    ):
        self.repository = repository
        self.billing_client = billing_client
        self.event_publisher = event_publisher

    def list_patients(self):
        return self.repository.find_all()

    def create_patient(self, data):
        """
        Create a patient and run its side effects.

        Args:
            data: validated dict with name / email / address / date_of_birth / registered_date

        Raises:
            EmailAlreadyExistsError: 预检查或唯一索引冲突，此时没有任何副作用
            ProvisioningFailedError: billing 失败，记录已经留在库里
        """
        email = data['email']

        if self.repository.exists_by_email(email):
            logger.warning("Rejecting create: email %s already registered", email)
            raise EmailAlreadyExistsError(detail={'email': email})

        patient = self.repository.insert(
            name=data['name'],
            email=email,
            address=data['address'],
            date_of_birth=data['date_of_birth'],
            registered_date=data['registered_date'],
        )
        logger.info("Patient %s persisted", patient.id)

        try:
            account = self.billing_client.create_billing_account(
                str(patient.id), patient.name, patient.email,
            )
        except ProvisioningFailedError:
            logger.error("Billing provisioning failed; patient %s remains without an account", patient.id)
            raise
        except Exception as exc:
            # 客户端实现之外的异常也统一归为 ProvisioningFailedError
            logger.exception("Unexpected billing error for patient %s", patient.id)
            raise ProvisioningFailedError(detail={'patient_id': str(patient.id)}) from exc

        logger.info("Billing account %s ready for patient %s", account.account_id, patient.id)

        self.event_publisher.publish(PatientEvent.from_patient(patient))

        return patient

    def update_patient(self, patient_id, data):
        """
        Update name / address / email / date_of_birth. registered_date is immutable here.

        Raises:
            PatientNotFoundError
            EmailAlreadyExistsError: 邮箱被 *其他* 患者占用（自己的邮箱不算）
        """
        patient = self.repository.find_by_id(patient_id)
        if patient is None:
            raise PatientNotFoundError(detail={'patient_id': str(patient_id)})

        email = data['email']
        if self.repository.exists_by_email_excluding(email, patient_id):
            logger.warning("Rejecting update of %s: email %s belongs to another patient", patient_id, email)
            raise EmailAlreadyExistsError(detail={'email': email})

        patient.name = data['name']
        patient.address = data['address']
        patient.email = email
        patient.date_of_birth = data['date_of_birth']

        return self.repository.save(patient)

    def delete_patient(self, patient_id):
        """Idempotent: deleting a missing id is not an error."""
        self.repository.delete_by_id(patient_id)
        logger.info("Patient %s deleted (if present)", patient_id)


def get_patient_service():
    """Wire PatientService with the collaborators selected in settings."""
    return PatientService(
        repository=PatientRepository(),
        billing_client=get_billing_client(),
        event_publisher=get_event_publisher(),
    )
