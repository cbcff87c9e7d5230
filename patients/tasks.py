import logging
from celery import shared_task

from patients.events.types import PatientEvent

logger = logging.getLogger(__name__)


@shared_task(name='analytics.patient_event', ignore_result=True)
def record_patient_event(payload: dict):
    """
    analytics 侧的消费者：接收患者生命周期事件并记录。

    不重试：事件本身是 best-effort 的，格式不对就记日志丢掉。
    """
    try:
        event = PatientEvent.from_dict(payload)
    except TypeError as exc:
        logger.error("[Celery][analytics] 无法解析事件，丢弃: %s (%s)", payload, exc)
        return None

    logger.info(
        "[Celery][analytics] Received patient event: type=%s id=%s name=%s email=%s",
        event.event_type, event.patient_id, event.name, event.email,
    )
    return event.patient_id
