import pytest

from color_logic import InvalidColorFormat
from color_sync import Authority, ColorSnapshot, ColorSyncController


@pytest.fixture
def controller():
    return ColorSyncController()


def test_fresh_controller_starts_on_default_color(controller):
    snap = controller.get_snapshot()
    assert snap == ColorSnapshot("#3B82F6", (59, 130, 246), (217, 91, 60), Authority.HEX)


def test_initial_hex_is_canonicalised():
    snap = ColorSyncController("ff0000").get_snapshot()
    assert snap.hex == "#FF0000"
    assert snap.hsl == (0, 100, 50)


def test_bad_initial_hex_raises():
    with pytest.raises(InvalidColorFormat):
        ColorSyncController("#3B")


def test_edit_hex_updates_rgb_and_hsl(controller):
    controller.edit_rgb("r", 0)
    snap = controller.edit_hex("#3B82F6")
    assert snap.hex == "#3B82F6"
    assert snap.rgb == (59, 130, 246)
    assert snap.hsl == (217, 91, 60)
    assert snap.authority is Authority.HEX


def test_edit_hex_keeps_text_verbatim(controller):
    snap = controller.edit_hex("ff8800")
    assert snap.hex == "ff8800"
    assert snap.rgb == (255, 136, 0)


def test_incomplete_hex_leaves_rgb_and_hsl(controller):
    controller.edit_rgb("g", 200)
    before = controller.get_snapshot()

    snap = controller.edit_hex("#3B")

    assert snap.hex == "#3B"
    assert snap.rgb == before.rgb
    assert snap.hsl == before.hsl
    assert snap.authority is Authority.HEX


def test_typing_a_hex_one_character_at_a_time(controller):
    for i in range(1, 8):
        snap = controller.edit_hex("#00FF00"[:i])
    assert snap.rgb == (0, 255, 0)
    assert snap.hsl == (120, 100, 50)


def test_edit_rgb_to_red(controller):
    controller.edit_rgb("r", 255)
    controller.edit_rgb("g", 0)
    snap = controller.edit_rgb("b", 0)
    assert snap == ColorSnapshot("#FF0000", (255, 0, 0), (0, 100, 50), Authority.RGB)


def test_edit_rgb_clamps(controller):
    assert controller.edit_rgb("r", 999).rgb.r == 255
    assert controller.edit_rgb("b", -20).rgb.b == 0


def test_edit_rgb_uppercases_hex_after_lowercase_typing(controller):
    controller.edit_hex("#abcdef")
    snap = controller.edit_rgb("r", 0xAB)
    assert snap.hex == "#ABCDEF"


def test_edit_hsl_to_red(controller):
    controller.edit_hsl("h", 0)
    controller.edit_hsl("s", 100)
    snap = controller.edit_hsl("l", 50)
    assert snap == ColorSnapshot("#FF0000", (255, 0, 0), (0, 100, 50), Authority.HSL)


def test_edit_hsl_clamps_and_folds_hue(controller):
    assert controller.edit_hsl("h", 360).hsl.h == 0
    assert controller.edit_hsl("h", 500).hsl.h == 359
    assert controller.edit_hsl("h", 361).hsl.h == 359
    assert controller.edit_hsl("h", 359).hsl.h == 359
    assert controller.edit_hsl("h", -10).hsl.h == 0
    assert controller.edit_hsl("s", 150).hsl.s == 100
    assert controller.edit_hsl("l", -1).hsl.l == 0


def test_edit_hsl_keeps_hsl_as_entered(controller):
    # Black: RGB carries no hue, but the entered HSL triple is kept
    controller.edit_hsl("l", 0)
    snap = controller.edit_hsl("h", 123)
    assert snap.rgb == (0, 0, 0)
    assert snap.hsl == (123, 91, 0)
    assert snap.hex == "#000000"


def test_unknown_channel_raises_without_touching_state(controller):
    before = controller.get_snapshot()
    with pytest.raises(ValueError):
        controller.edit_rgb("x", 10)
    with pytest.raises(ValueError):
        controller.edit_hsl("r", 10)
    assert controller.get_snapshot() == before


def test_authority_follows_last_edit(controller):
    assert controller.edit_rgb("r", 1).authority is Authority.RGB
    assert controller.edit_hsl("s", 1).authority is Authority.HSL
    assert controller.edit_hex("#000000").authority is Authority.HEX


def test_listeners_get_one_snapshot_per_edit(controller):
    seen = []
    controller.subscribe(seen.append)
    controller.subscribe(seen.append)

    controller.edit_hex("#3B")
    controller.edit_rgb("r", 10)
    controller.edit_hsl("h", 10)

    assert len(seen) == 3
    assert seen[-1] == controller.get_snapshot()
    assert [s.authority for s in seen] == [Authority.HEX, Authority.RGB, Authority.HSL]

    controller.unsubscribe(seen.append)
    controller.edit_rgb("g", 10)
    assert len(seen) == 3


def test_listener_sees_completed_state(controller):
    def check(snapshot):
        assert controller.get_snapshot() == snapshot
        assert snapshot.rgb == (255, 0, 0)

    controller.subscribe(check)
    controller.edit_hex("#FF0000")


def test_snapshots_are_immutable(controller):
    snap = controller.get_snapshot()
    with pytest.raises(AttributeError):
        snap.hex = "#000000"
    controller.edit_rgb("r", 0)
    assert snap.rgb == (59, 130, 246)
