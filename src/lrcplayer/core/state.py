# core/state.py
from __future__ import annotations
from dataclasses import dataclass
from PySide6.QtCore import QObject, Signal, Slot

@dataclass(frozen=True)
class Notify:
    message: str
    notify_type: str = "info"   # info/success/warning/error

class AppState(QObject):
    notification = Signal(object)   # emits Notify
    track_changed = Signal(object)  # emits NowPlaying | None

    def __init__(self, config=None):
        super().__init__()
        self.config = config
        self.client = None
        self.player = None
        self.session = None
        self.queued_notifications: list[Notify] = []

    @Slot(str, str)
    def notify(self, message: str, notify_type: str = "info"):
        self.notification.emit(Notify(message=message, notify_type=notify_type))
