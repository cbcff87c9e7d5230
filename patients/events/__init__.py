from .base import BaseEventPublisher
from .factory import get_event_publisher
from .types import PatientEvent

__all__ = ['BaseEventPublisher', 'PatientEvent', 'get_event_publisher']
