from .interfaces import NotificationSink, ProjectEvent

__all__ = ["NotificationSink", "ProjectEvent"]
