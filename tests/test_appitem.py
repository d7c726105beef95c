import pytest

from dshell.dock.appitem import (
    AbstractWindow,
    AppItem,
    ItemStyle,
    escape_to_object_path,
    unescape_from_object_path,
)


class FakeWindow(AbstractWindow):
    def __init__(self, icon=""):
        super().__init__()
        self._icon = icon

    @property
    def pid(self):
        return 1

    @property
    def icon(self):
        return self._icon

    def set_icon(self, icon):
        self._icon = icon
        self.icon_changed.emit()

    @property
    def title(self):
        return "title"

    @property
    def is_active(self):
        return False

    @property
    def should_skip(self):
        return False

    def is_demanding_attention(self):
        return False

    def close(self):
        pass

    def activate(self):
        pass

    def minimize(self):
        pass

    def is_minimized(self):
        return False

    def created_time(self):
        return 0

    def window_type(self):
        return "normal"

    def display_name(self):
        return "name"

    def allow_close(self):
        return True

    def update(self):
        pass

    def kill_client(self):
        pass


def test_escape_empty_gives_underscore():
    assert escape_to_object_path("") == "_"


def test_escape_dot():
    assert escape_to_object_path("org.deepin") == "org_2edeepin"


def test_escape_leaves_alphanumerics():
    assert escape_to_object_path("abcXYZ019") == "abcXYZ019"


@pytest.mark.parametrize("app_id", ["org.deepin.dde-shell", "a b", "x-y.z", "a_b", "dde-file-manager"])
def test_escape_round_trip(app_id):
    escaped = escape_to_object_path(app_id)
    assert all(c.isalnum() or c == "_" for c in escaped)
    assert unescape_from_object_path(escaped) == app_id


def test_unescape_plain_text_unchanged():
    assert unescape_from_object_path("deepin") == "deepin"
    assert unescape_from_object_path("_") == "_"


def test_abstract_window_cannot_be_instantiated():
    with pytest.raises(TypeError):
        AbstractWindow()


def test_icon_falls_back_to_desktop_icon():
    item = AppItem("app", desktop_icon="app-icon")
    assert not item.has_window()
    assert item.icon == "app-icon"


def test_icon_from_active_window():
    item = AppItem("app", desktop_icon="app-icon")
    item.append_window(FakeWindow("win-icon"))
    assert item.has_window()
    assert item.icon == "win-icon"


def test_empty_window_icon_falls_back():
    item = AppItem("app", desktop_icon="app-icon")
    item.append_window(FakeWindow(""))
    assert item.icon == "app-icon"


def test_append_window_updates_current_and_notifies():
    item = AppItem("app")
    calls = []
    item.current_active_window_changed.connect(lambda: calls.append(1))
    first, second = FakeWindow("a"), FakeWindow("b")
    item.append_window(first)
    item.append_window(second)
    assert item.current_active_window is second
    assert item.windows == [first, second]
    assert len(calls) == 2


def test_icon_change_forwarded_only_from_current_window():
    item = AppItem("app")
    calls = []
    item.icon_changed.connect(lambda: calls.append(1))
    first, second = FakeWindow("a"), FakeWindow("b")
    item.append_window(first)
    first.set_icon("c")
    assert len(calls) == 1
    item.update_current_active_window(second)
    first.set_icon("d")
    assert len(calls) == 1
    second.set_icon("e")
    assert len(calls) == 2
    assert item.icon == "e"


def test_active_notifies_only_on_change():
    item = AppItem("app")
    calls = []
    item.active_changed.connect(lambda: calls.append(1))
    item.active = True
    item.active = True
    assert item.active is True
    assert len(calls) == 1


def test_docked_and_style_setters():
    item = AppItem("app")
    docked, styled = [], []
    item.docked_changed.connect(lambda: docked.append(1))
    item.item_style_changed.connect(lambda: styled.append(1))
    item.docked = True
    item.item_style = ItemStyle.WINDOW_SPLIT
    item.item_style = ItemStyle.WINDOW_SPLIT
    assert item.docked is True
    assert item.item_style is ItemStyle.WINDOW_SPLIT
    assert (len(docked), len(styled)) == (1, 1)


def test_id_kept():
    assert AppItem("org.example.app").id == "org.example.app"