"""UI features of the Tkinter desktop host."""

from .launcher_feature import LauncherFeature
from .notification_feature import NotificationFeature

__all__ = ["LauncherFeature", "NotificationFeature"]
