"""
Viewer shell.

Connects user actions to the component and the module loader and turns
load outcomes into status messages. Rendering is left to the host UI.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .component import PCBComponent
from ..exceptions import ExhaustionError
from ..loader import LoadedResource, ResourceLoader

logger = logging.getLogger(__name__)

ROTATION_STEP = math.pi / 4
DEFAULT_MODULE_ID = "module-001"


class StatusKind(str, Enum):
    """Status indicator classes."""

    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Status:
    kind: StatusKind
    text: str

    @classmethod
    def pending(cls) -> "Status":
        return cls(StatusKind.PENDING, "⏳ Loading module...")

    @classmethod
    def success(cls) -> "Status":
        return cls(StatusKind.SUCCESS, "✅ Module loaded successfully")

    @classmethod
    def error(cls, message: str) -> "Status":
        return cls(StatusKind.ERROR, f"❌ {message}")


class ViewerShell:
    """Presentation glue around one component and one loader."""

    def __init__(
        self,
        loader: ResourceLoader,
        component: PCBComponent | None = None,
        on_status: Callable[[Status], None] | None = None,
    ):
        self.loader = loader
        self.selected_component = component if component is not None else PCBComponent()
        self.on_status = on_status
        self.status: Status | None = None
        self.loaded_module: LoadedResource | None = None

    def _set_status(self, status: Status) -> None:
        self.status = status
        if self.on_status:
            self.on_status(status)

    def rotate_component(self, axis: str) -> None:
        """Rotate the selected component one step about `axis`."""
        if self.selected_component is None:
            return
        self.selected_component.rotate(axis, ROTATION_STEP)

    async def load_module(self, module_id: str = DEFAULT_MODULE_ID) -> Status:
        """
        Load a module and report the outcome as a status.

        Load failures are shown to the user, never raised.
        """
        self._set_status(Status.pending())
        try:
            self.loaded_module = await self.loader.load(module_id)
        except (ExhaustionError, ValueError) as e:
            logger.info(f"[Viewer] Module {module_id!r} unavailable: {e}")
            self._set_status(Status.error(str(e)))
        else:
            self._set_status(Status.success())
        return self.status
