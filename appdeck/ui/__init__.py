"""User interface layer: host adapters and desktop shells."""

from .desktop_types import DesktopApp
from .headless import HeadlessHost, HeadlessNode, HeadlessUtilityLibrary, RecordingLauncher
from .headless_app import HeadlessDesktopApp
from .sound import SoundPlayer
from .tween import TweenHandle

__all__ = [
    "DesktopApp",
    "HeadlessDesktopApp",
    "HeadlessHost",
    "HeadlessNode",
    "HeadlessUtilityLibrary",
    "RecordingLauncher",
    "SoundPlayer",
    "TweenHandle",
]
