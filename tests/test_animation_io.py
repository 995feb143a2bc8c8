import pytest

from rosekit.animation import Animation, AnimationEventData, Frame
from rosekit.animation_io import (
    format_animation,
    load_animation,
    parse_animation,
    save_animation,
)

SAMPLE = (
    "Texture hero.png\n"
    "Size 32 48\n"
    "Loop\n"
    "Frame 0 0.1\n"
    "Frame 2 0.25\n"
    "Event step 0.5\n"
)


def test_parse_sample():
    animation = parse_animation(SAMPLE)
    assert animation.texture == "hero.png"
    assert (animation.sprite_frame_width, animation.sprite_frame_height) == (32, 48)
    assert animation.is_looping is True
    assert [f.frame_position for f in animation.frames] == [0, 2]
    assert [f.frame_duration for f in animation.frames] == pytest.approx([0.1, 0.25])
    assert [(e.event_name, e.event_time) for e in animation.animation_events] == [
        ("step", 0.5)
    ]


def test_parse_without_loop():
    animation = parse_animation("Texture a.png\nSize 8 8\n")
    assert animation.is_looping is False
    assert animation.frames == []


def test_parse_crlf_lines():
    animation = parse_animation("Texture a.png\r\nSize 16 24\r\nFrame 3 1.5\r\n")
    assert animation.texture == "a.png"
    assert animation.sprite_frame_height == 24
    assert animation.frames[0].frame_duration == pytest.approx(1.5)


def test_parse_missing_size():
    with pytest.raises(ValueError):
        parse_animation("Texture a.png\n")


def test_parse_missing_texture():
    with pytest.raises(ValueError):
        parse_animation("Size 8 8\n")


def test_parse_bad_number():
    with pytest.raises(ValueError):
        parse_animation("Texture a.png\nSize wide 8\n")


def test_format_pinned():
    animation = Animation(32, 32, "a.png")
    animation.add_frame(Frame(1, 0.5))
    assert format_animation(animation) == (
        "Texture a.png\nSize 32 32\nFrame 1 0.500000\n"
    )


def test_format_skips_unusable_events():
    animation = Animation(4, 4, "a.png")
    animation.add_event(AnimationEventData(0.1, ""))
    animation.add_event(AnimationEventData(0.2, "MyEvent"))
    animation.add_event(AnimationEventData(0.3, "jump"))
    parsed = parse_animation(format_animation(animation))
    assert [e.event_name for e in parsed.animation_events] == ["jump"]


def test_format_parse_round_trip():
    animation = Animation(20, 30, "sheet.png", True)
    animation.add_frame(Frame(0, 0.125))
    animation.add_frame(Frame(4, 0.75))
    animation.add_event(AnimationEventData(0.25, "swing"))
    parsed = parse_animation(format_animation(animation))
    assert parsed.texture == animation.texture
    assert parsed.is_looping is True
    assert [(f.frame_position, f.frame_duration) for f in parsed.frames] == [
        (0, 0.125),
        (4, 0.75),
    ]
    assert [(e.event_name, e.event_time) for e in parsed.animation_events] == [
        ("swing", 0.25)
    ]


def test_save_and_load(tmp_path):
    path = tmp_path / "walk.anim"
    animation = Animation(16, 16, "walk.png")
    animation.add_frame(Frame(2, 0.5))
    save_animation(animation, str(path))
    loaded = load_animation(str(path))
    assert loaded.texture == "walk.png"
    assert loaded.is_looping is False
    assert [f.frame_position for f in loaded.frames] == [2]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_animation(str(tmp_path / "absent.anim"))