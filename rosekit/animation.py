"""Sprite-sheet animations: frames, timed events and source rectangles."""

from dataclasses import dataclass, field
from typing import NamedTuple

from .asset import Asset
from .guid import Guid, new_guid
from .reflection import TypeInfo


class Rect(NamedTuple):
    """An axis-aligned rectangle in pixels."""

    x: int
    y: int
    w: int
    h: int


@dataclass(eq=False)
class Frame:
    """One frame: its column in the sprite sheet and how long it shows."""

    frame_position: int = 0
    frame_duration: float = 0.0
    id: Guid = field(default_factory=new_guid)


@dataclass(eq=False)
class AnimationEventData:
    """A named event fired at a point in the animation's timeline."""

    event_time: float = 0.0
    event_name: str = "NewAction"
    id: Guid = field(default_factory=new_guid)


@dataclass(eq=False)
class Animation(Asset):
    """A horizontal strip of equally sized sprite frames."""

    sprite_frame_width: int = 1
    sprite_frame_height: int = 1
    texture: str = ""
    is_looping: bool = False
    frames: list = field(default_factory=list)
    animation_events: list = field(default_factory=list)

    def source_rect(self, frame: int) -> Rect:
        """Return the sheet rectangle of frame number ``frame``."""
        if not 0 <= frame < len(self.frames):
            raise IndexError(f"frame {frame} outside animation bounds")
        return Rect(
            self.frames[frame].frame_position * self.sprite_frame_width,
            0,
            self.sprite_frame_width,
            self.sprite_frame_height,
        )

    def add_frame(self, frame: Frame) -> None:
        self.frames.append(frame)

    def add_event(self, event: AnimationEventData) -> None:
        self.animation_events.append(event)


ANIMATION_INFO = TypeInfo(
    Animation(),
    ("sprite_frame_width", "sprite_frame_height", "texture", "is_looping"),
)