"""
BaseEventPublisher — 事件发布的抽象基类。

publish() 返回 None 只代表「已交给传输层」，不代表「已送达」。
实现必须自己吞掉投递失败（记日志），绝不能让请求因此失败。
"""

from abc import ABC, abstractmethod

from .types import PatientEvent


class BaseEventPublisher(ABC):

    @abstractmethod
    def publish(self, event: PatientEvent) -> None:
        """Hand the event off for asynchronous delivery. Must not raise."""
