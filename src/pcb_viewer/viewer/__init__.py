"""
PCB Viewer - Viewer Shell.

Component orientation and load status presentation.
"""

from .orientation import Orientation
from .component import PCBComponent
from .shell import Status, StatusKind, ViewerShell, ROTATION_STEP, DEFAULT_MODULE_ID

__all__ = [
    "Orientation",
    "PCBComponent",
    "Status",
    "StatusKind",
    "ViewerShell",
    "ROTATION_STEP",
    "DEFAULT_MODULE_ID",
]
