"""Tests for Sprite construction, time window and rendering."""
import pytest
from tick_osb import Easing, EventShapeError, Layer, Origin, Sprite, SpriteConfig


class TestConstruction:
    def test_path_only_defaults(self) -> None:
        sprite = Sprite("sb/sprite.png")
        assert sprite.path == "sb/sprite.png"
        assert sprite.origin is Origin.CENTRE
        assert sprite.layer is Layer.BACKGROUND
        assert sprite.position == (320, 240)
        assert sprite.current_depth == 0

    def test_origin_path_components(self) -> None:
        sprite = Sprite(Origin.TOP_LEFT, "sb/bg.png", 0, 0)
        assert sprite.origin is Origin.TOP_LEFT
        assert (sprite.x, sprite.y) == (0, 0)

    def test_from_config(self) -> None:
        sprite = Sprite(SpriteConfig(path="sb/a.png", layer=Layer.FOREGROUND))
        assert sprite.layer is Layer.FOREGROUND
        assert sprite.config == SpriteConfig(path="sb/a.png", layer=Layer.FOREGROUND)

    def test_rejected_shape(self) -> None:
        with pytest.raises(EventShapeError):
            Sprite(42)


class TestPosition:
    def test_initial_position_unaffected_by_move(self) -> None:
        """x/y report the initial position, not where a move takes the sprite."""
        sprite = Sprite("sb/sprite.png")
        sprite.append_move(0, 100, 100)
        assert sprite.x == 320
        assert sprite.y == 240


class TestTimeWindow:
    def test_fresh_sprite_has_no_window(self) -> None:
        sprite = Sprite("sb/sprite.png")
        assert sprite.start_time is None
        assert sprite.end_time is None

    def test_move_then_fade(self) -> None:
        sprite = Sprite("sb/sprite.png")
        sprite.append_move(100, 200, 0, 0, 320, 240)
        assert sprite.start_time == 100
        assert sprite.end_time == 200
        sprite.append_fade(0, 100, 0, 1)
        assert sprite.start_time == 0
        assert sprite.end_time == 200

    def test_end_extends(self) -> None:
        sprite = Sprite("sb/sprite.png")
        sprite.append_move(0, 100, 0, 0, 320, 240)
        assert sprite.end_time == 100
        sprite.append_fade(100, 200, 1, 0)
        assert sprite.end_time == 200

    def test_static_event_window(self) -> None:
        sprite = Sprite("sb/sprite.png")
        sprite.append_scale(500, 1)
        assert (sprite.start_time, sprite.end_time) == (500, 500)

    def test_window_is_min_and_max_over_events(self) -> None:
        sprite = Sprite("sb/sprite.png")
        spans = [(400, 900), (50, 60), (1000, 1000), (300, 1200)]
        for start, end in spans:
            sprite.append_rotate(start, end, 0, 1)
        assert sprite.start_time == min(s for s, _ in spans)
        assert sprite.end_time == max(e for _, e in spans)

    def test_window_never_narrows(self) -> None:
        sprite = Sprite("sb/sprite.png")
        sprite.append_fade(0, 1000, 0, 1)
        sprite.append_fade(200, 300, 1, 0)
        assert (sprite.start_time, sprite.end_time) == (0, 1000)

    def test_unordered_event_uses_raw_fields(self) -> None:
        """An event with start > end folds its start into the min and end into the max."""
        sprite = Sprite("sb/sprite.png")
        sprite.append_fade(500, 100, 0, 1)
        assert sprite.start_time == 500
        assert sprite.end_time == 100


class TestAppend:
    def test_append_returns_stored_event(self) -> None:
        sprite = Sprite("sb/sprite.png")
        event = sprite.append_fade(0, 1)
        assert list(sprite.events) == [event]

    def test_depth_is_stamped(self) -> None:
        sprite = Sprite("sb/sprite.png")
        sprite.current_depth = 2
        event = sprite.append_fade(0, 1)
        assert event.depth == 2
        assert event.to_line() == "   F,0,0,,1"

    def test_stamp_overrides_prebuilt_depth(self) -> None:
        from tick_osb import fade

        event = fade(0, 1)
        event.set_depth(5)
        sprite = Sprite("sb/sprite.png")
        stored = sprite.append_fade(event)
        assert stored.depth == 0
        assert stored is not event
        assert event.depth == 5
        assert list(sprite.events) == [stored]

    def test_shared_event_owned_per_sprite(self) -> None:
        from tick_osb import fade

        shared = fade(0, 1)
        first = Sprite("a.png")
        first.append_fade(shared)
        before = first.render()

        second = Sprite("b.png")
        second.current_depth = 2
        second.append_fade(shared)

        assert first.render() == before
        assert first.render().endswith("\n F,0,0,,1\n")
        assert second.render().endswith("\n   F,0,0,,1\n")
        assert shared.depth == 0

    def test_returned_event_cannot_change_times(self) -> None:
        import dataclasses

        sprite = Sprite("a.png")
        event = sprite.append_fade(0, 100, 0, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.end_time = 5000  # type: ignore[misc]
        assert (sprite.start_time, sprite.end_time) == (0, 100)
        assert event.to_line() == " F,0,0,100,0,1"

    def test_kind_mismatch(self) -> None:
        from tick_osb import fade

        sprite = Sprite("sb/sprite.png")
        with pytest.raises(EventShapeError):
            sprite.append_move(fade(0, 1))
        assert sprite.start_time is None
        assert len(sprite.events) == 0

    def test_tuple_argument(self) -> None:
        sprite = Sprite("sb/sprite.png")
        sprite.append_move((Easing.OUT, 0, 1000, (0, 0), (320, 240)))
        assert sprite.render().endswith(" M,1,0,1000,0,0,320,240\n")


class TestRender:
    def test_header_only(self) -> None:
        sprite = Sprite("sb/sprite.png")
        assert sprite.render() == 'Sprite,Background,Centre,"sb/sprite.png",320,240\n'

    def test_header_and_grouped_events(self) -> None:
        sprite = Sprite(Origin.TOP_LEFT, "sb/bg.png", 0, 0)
        sprite.append_fade(0, 1000, 0, 1)
        sprite.append_move(Easing.QUAD_OUT, 0, 1000, 0, 0, 100, 50)
        sprite.append_scale(0, 0.5)
        sprite.append_rotate(500, 1.25)
        assert sprite.render() == (
            'Sprite,Background,TopLeft,"sb/bg.png",0,0\n'
            " M,4,0,1000,0,0,100,50\n"
            " F,0,0,1000,0,1\n"
            " R,0,500,,1.25\n"
            " S,0,0,,0.5\n"
        )

    def test_float_position(self) -> None:
        sprite = Sprite("a.png", 10.5, 20.0)
        assert sprite.render() == 'Sprite,Background,Centre,"a.png",10.5,20\n'

    def test_set_layer(self) -> None:
        sprite = Sprite("a.png")
        sprite.set_layer(Layer.OVERLAY)
        assert sprite.layer is Layer.OVERLAY
        assert sprite.render().startswith("Sprite,Overlay,Centre,")

    def test_str_is_render(self) -> None:
        sprite = Sprite("a.png")
        sprite.append_fade(0, 1)
        assert str(sprite) == sprite.render()
