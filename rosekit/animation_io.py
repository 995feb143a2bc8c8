"""Reading and writing the line-based ``.anim`` animation format."""

import logging
import re
from typing import Iterator

from .animation import Animation, AnimationEventData, Frame

logger = logging.getLogger(__name__)

_LINE = re.compile(r"[^\r\n]*")
_INT = re.compile(r"\s*[+-]?\d+")
_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _read_to_end_of_line(text: str, start: int) -> str:
    if start >= len(text):
        return ""
    return _LINE.match(text, start).group()


def _read_to_space(text: str, start: int) -> str:
    end = text.find(" ", start)
    return text[start:] if end == -1 else text[start:end]


def _leading_int(value: str) -> int:
    match = _INT.match(value)
    if match is None:
        raise ValueError(f"expected an integer, got {value!r}")
    return int(match.group())


def _leading_float(value: str) -> float:
    match = _FLOAT.match(value)
    if match is None:
        raise ValueError(f"expected a number, got {value!r}")
    return float(match.group())


def _occurrences(text: str, word: str) -> Iterator[int]:
    pos = text.find(word)
    while pos != -1:
        yield pos
        pos = text.find(word, pos + 1)


def _require(text: str, word: str) -> int:
    pos = text.find(word)
    if pos == -1:
        raise ValueError(f"animation has no {word} entry")
    return pos


def parse_animation(text: str) -> Animation:
    """Build an Animation from the text of an ``.anim`` file."""
    texture_pos = _require(text, "Texture")
    texture = _read_to_end_of_line(text, texture_pos + 8)

    size_pos = _require(text, "Size")
    width_text = _read_to_space(text, size_pos + 5)
    height_text = _read_to_end_of_line(text, size_pos + 5 + len(width_text) + 1)
    width = _leading_int(width_text)
    height = _leading_int(height_text)

    animation = Animation(width, height, texture, "Loop" in text)

    for pos in _occurrences(text, "Frame"):
        position_text = _read_to_space(text, pos + 6)
        duration_text = _read_to_end_of_line(text, pos + 6 + len(position_text) + 1)
        animation.add_frame(
            Frame(_leading_int(position_text), _leading_float(duration_text))
        )

    for pos in _occurrences(text, "Event"):
        name = _read_to_space(text, pos + 6)
        time_text = _read_to_end_of_line(text, pos + 6 + len(name) + 1)
        animation.add_event(AnimationEventData(_leading_float(time_text), name))

    return animation


def format_animation(animation: Animation) -> str:
    """Return the ``.anim`` text for ``animation``.

    Events with an empty name, or a name containing ``Event``, are left out.
    """
    lines = [
        f"Texture {animation.texture}",
        f"Size {int(animation.sprite_frame_width)} {int(animation.sprite_frame_height)}",
    ]
    if animation.is_looping:
        lines.append("Loop")
    lines.extend(
        f"Frame {int(frame.frame_position)} {float(frame.frame_duration):f}"
        for frame in animation.frames
    )
    for event in animation.animation_events:
        if not event.event_name:
            logger.info("Ignoring empty event")
            continue
        if "Event" in event.event_name:
            logger.info("Event name cannot contain the word Event")
            continue
        lines.append(f"Event {event.event_name} {float(event.event_time):f}")
    return "".join(line + "\n" for line in lines)


def load_animation(file_name: str) -> Animation:
    """Read and parse the ``.anim`` file ``file_name``."""
    with open(file_name, encoding="utf-8", newline="") as handle:
        return parse_animation(handle.read())


def save_animation(animation: Animation, file_name: str) -> None:
    """Write ``animation`` to ``file_name``, replacing any previous content."""
    text = format_animation(animation)
    with open(file_name, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)