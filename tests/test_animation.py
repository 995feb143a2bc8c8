import pytest

from rosekit.animation import (
    ANIMATION_INFO,
    Animation,
    AnimationEventData,
    Frame,
    Rect,
)
from rosekit.reflection import InfoType


def test_source_rect_first_column():
    animation = Animation(32, 16)
    animation.add_frame(Frame(0, 0.1))
    assert animation.source_rect(0) == Rect(0, 0, 32, 16)


def test_source_rect_second_column_offsets_by_width():
    animation = Animation(24, 40)
    animation.add_frame(Frame(0, 0.1))
    animation.add_frame(Frame(1, 0.1))
    rect = animation.source_rect(1)
    assert rect.x == 24
    assert (rect.y, rect.w, rect.h) == (0, 24, 40)


@pytest.mark.parametrize("index", [1, 5, -1])
def test_source_rect_out_of_bounds(index):
    animation = Animation(8, 8)
    animation.add_frame(Frame())
    with pytest.raises(IndexError):
        animation.source_rect(index)


def test_source_rect_without_frames():
    with pytest.raises(IndexError):
        Animation().source_rect(0)


def test_frames_and_events_keep_order():
    animation = Animation()
    frames = [Frame(i, 0.2) for i in range(3)]
    for frame in frames:
        animation.add_frame(frame)
    first = AnimationEventData(0.1, "hit")
    second = AnimationEventData(0.3, "land")
    animation.add_event(first)
    animation.add_event(second)
    assert animation.frames == frames
    assert [e.event_name for e in animation.animation_events] == ["hit", "land"]


def test_default_event_name():
    assert AnimationEventData().event_name == "NewAction"


def test_ids_are_unique():
    ids = {Frame().id for _ in range(50)} | {AnimationEventData().id for _ in range(50)}
    assert len(ids) == 100


def test_new_animations_do_not_share_lists():
    first, second = Animation(), Animation()
    first.add_frame(Frame())
    assert second.frames == []


def test_reflection_describes_exposed_fields():
    assert ANIMATION_INFO.var_names == (
        "sprite_frame_width",
        "sprite_frame_height",
        "texture",
        "is_looping",
    )
    assert ANIMATION_INFO.get_type("sprite_frame_width") is InfoType.INT
    assert ANIMATION_INFO.get_type("texture") is InfoType.STRING
    assert ANIMATION_INFO.get_type("is_looping") is InfoType.BOOL


def test_reflection_reads_values():
    animation = Animation(12, 20, "sheet.png", True)
    assert ANIMATION_INFO.get_var(animation, "texture") == "sheet.png"
    assert ANIMATION_INFO.get_var(animation, "sprite_frame_height") == 20
    assert ANIMATION_INFO.get_var(animation, "frames") is None