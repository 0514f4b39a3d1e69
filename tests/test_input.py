import pytest

from sllothkit.input import Event, EventType, InputManager, MouseButton
from sllothkit.vector_algebra import Vector2


@pytest.fixture
def manager():
    m = InputManager()
    m.init()
    return m


def press(m, key):
    m.handle_event(Event(EventType.KEY_PRESSED, key=key))


def release(m, key):
    m.handle_event(Event(EventType.KEY_RELEASED, key=key))


def test_fresh_manager_reports_nothing(manager):
    assert manager.key_pressed("W") is False
    assert manager.key_down("W") is False
    assert manager.key_up("W") is False
    assert manager.mouse_pressed(MouseButton.LEFT) is False
    assert manager.mouse_position == Vector2(0, 0)


def test_key_press_sets_down_and_pressed(manager):
    press(manager, "W")
    assert manager.key_down("W") is True
    assert manager.key_pressed("W") is True
    assert manager.key_up("W") is False
    assert manager.key_pressed("A") is False


def test_update_clears_down_but_keeps_pressed(manager):
    press(manager, "Space")
    manager.update()
    assert manager.key_down("Space") is False
    assert manager.key_pressed("Space") is True


def test_key_release(manager):
    press(manager, "D")
    manager.update()
    release(manager, "D")
    assert manager.key_up("D") is True
    assert manager.key_pressed("D") is False
    manager.update()
    assert manager.key_up("D") is False


def test_mouse_buttons(manager):
    manager.handle_event(Event(EventType.MOUSE_BUTTON_PRESSED, button=MouseButton.LEFT))
    assert manager.mouse_down(MouseButton.LEFT) is True
    assert manager.mouse_pressed(MouseButton.LEFT) is True
    assert manager.mouse_down(MouseButton.RIGHT) is False
    manager.update()
    assert manager.mouse_down(MouseButton.LEFT) is False
    manager.handle_event(Event(EventType.MOUSE_BUTTON_RELEASED, button=MouseButton.LEFT))
    assert manager.mouse_up(MouseButton.LEFT) is True
    assert manager.mouse_pressed(MouseButton.LEFT) is False
    manager.update()
    assert manager.mouse_up(MouseButton.LEFT) is False


@pytest.mark.parametrize("kind", [EventType.MOUSE_MOVED, EventType.RESIZED])
def test_mouse_position_follows_events(manager, kind):
    manager.handle_event(Event(kind, position=Vector2(12, 34)))
    assert manager.mouse_position == Vector2(12, 34)


def test_closed_event_changes_nothing(manager):
    press(manager, "E")
    manager.handle_event(Event(EventType.CLOSED))
    assert manager.key_pressed("E") is True
    assert manager.mouse_position == Vector2(0, 0)


def test_init_resets_state(manager):
    press(manager, "Q")
    manager.handle_event(Event(EventType.MOUSE_MOVED, position=Vector2(5, 6)))
    manager.init()
    assert manager.key_pressed("Q") is False
    assert manager.key_down("Q") is False
    assert manager.mouse_position == Vector2(0, 0)