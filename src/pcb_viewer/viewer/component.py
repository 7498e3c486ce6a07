"""
The PCB component shown in the viewer.
"""

from dataclasses import dataclass, field

from .orientation import Orientation


@dataclass
class PCBComponent:
    """A box-shaped board part centred on its own origin."""

    width: float = 1.0
    height: float = 0.5
    depth: float = 0.3
    color: int = 0x2196F3
    metalness: float = 0.5
    roughness: float = 0.5
    orientation: Orientation = field(default_factory=Orientation)

    @property
    def dimensions(self) -> tuple[float, float, float]:
        return (self.width, self.height, self.depth)

    def rotate(self, axis: str, angle: float) -> None:
        """Rotate about the component's local `axis` by `angle` radians."""
        self.orientation.rotate(axis, angle)
