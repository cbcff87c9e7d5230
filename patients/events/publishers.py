"""
具体 EventPublisher 实现。

已注册：
  celery — CeleryEventPublisher  (Redis broker，队列名 = PATIENT_EVENT_QUEUE)
  null   — NullEventPublisher    (丢弃事件，只打 debug 日志)
"""

import logging

from django.conf import settings

from .base import BaseEventPublisher
from .types import PatientEvent

logger = logging.getLogger(__name__)


class CeleryEventPublisher(BaseEventPublisher):
    """
    把事件投到 broker 上由 analytics worker 消费。

    - retry=False：broker 连不上就立刻放弃，不在请求线程里重试
    - 连接 / socket 超时见 CELERY_BROKER_TRANSPORT_OPTIONS
    - 任何异常都在这里吞掉并记日志
    """

    def __init__(self, queue=None):
        self.queue = queue or settings.PATIENT_EVENT_QUEUE

    def publish(self, event: PatientEvent) -> None:
        from ..tasks import record_patient_event

        try:
            record_patient_event.apply_async(
                args=[event.to_dict()],
                queue=self.queue,
                retry=False,
            )
        except Exception:
            logger.exception(
                "Failed to publish %s event for patient %s to queue %r",
                event.event_type, event.patient_id, self.queue,
            )
            return

        logger.info("Published %s event for patient %s", event.event_type, event.patient_id)


class NullEventPublisher(BaseEventPublisher):

    def publish(self, event: PatientEvent) -> None:
        logger.debug("Dropping %s event for patient %s", event.event_type, event.patient_id)
