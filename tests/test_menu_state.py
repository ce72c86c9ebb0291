import pytest

from mapper.menu.components import MenuState


def _menu(**kwargs) -> MenuState:
    return MenuState(selected_collection="Dungeon Tiles", selected_tile="Altar.a", **kwargs)


def test_page_up_at_first_page_is_noop():
    menu = _menu()
    assert not menu.toggle_page(-1)
    assert menu.page == 0


def test_page_down_is_unbounded_by_default():
    menu = _menu()
    for _ in range(50):
        assert menu.toggle_page(1, total_items=3)
    assert menu.page == 50
    assert list(menu.visible_range(3)) == []


def test_page_down_stops_at_last_page_when_clamped():
    menu = _menu(clamp_pages=True)
    assert menu.toggle_page(1, total_items=10)
    assert not menu.toggle_page(1, total_items=10)
    assert menu.page == 1
    assert list(menu.visible_range(10)) == [8, 9]


def test_clamped_page_on_empty_collection_stays_at_zero():
    menu = _menu(clamp_pages=True)
    assert not menu.toggle_page(1, total_items=0)
    assert menu.page == 0


def test_invalid_direction_raises():
    menu = _menu()
    with pytest.raises(ValueError):
        menu.toggle_page(2)
    with pytest.raises(ValueError):
        menu.cycle_orientation(0)


def test_visible_range_first_page():
    menu = _menu()
    assert list(menu.visible_range(10)) == list(range(8))
    assert list(menu.visible_range(3)) == [0, 1, 2]


def test_orientation_cycle_has_order_four():
    for start in (0, 90, 180, 270):
        menu = _menu(selected_orientation=start)
        for _ in range(4):
            menu.cycle_orientation(1)
        assert menu.selected_orientation == start
        for _ in range(4):
            menu.cycle_orientation(-1)
        assert menu.selected_orientation == start
        menu.cycle_orientation(1)
        menu.cycle_orientation(-1)
        assert menu.selected_orientation == start
        menu.cycle_orientation(-1)
        menu.cycle_orientation(1)
        assert menu.selected_orientation == start


def test_orientation_wraps_backward_from_zero():
    menu = _menu()
    assert menu.cycle_orientation(-1) == 270
    assert menu.cycle_orientation(1) == 0
    menu.selected_orientation = 270
    assert menu.cycle_orientation(1) == 0


def test_toggle_dropdown_flips():
    menu = _menu()
    menu.toggle_dropdown()
    assert menu.is_open
    menu.toggle_dropdown()
    assert not menu.is_open


def test_select_tile_closes_dropdown():
    menu = _menu(is_open=True)
    menu.select_tile("Bridge.b")
    assert menu.selected_tile == "Bridge.b"
    assert not menu.is_open


def test_select_collection_resets_page_and_orientation():
    menu = _menu(page=3, selected_orientation=180, is_open=True)
    menu.select_collection("Hidden Crypts", "Pit.a")
    assert (menu.selected_collection, menu.selected_tile) == ("Hidden Crypts", "Pit.a")
    assert menu.page == 0
    assert menu.selected_orientation == 0
    assert not menu.is_open


def test_move_to_clamps_to_top_left():
    menu = _menu(x=40, y=40)
    menu.move_to(-64, 32)
    assert (menu.x, menu.y) == (0, 72)
    menu.move_to(96, -500)
    assert (menu.x, menu.y) == (96, 0)
