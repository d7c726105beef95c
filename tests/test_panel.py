import threading

import pytest

from dshell.loader import PluginLoader
from dshell.osd.panel import OsdPanel


@pytest.fixture
def panel(tmp_path):
    result = OsdPanel(loader=PluginLoader(package_dirs=[str(tmp_path)]))
    result.load()
    result.init()
    yield result
    result.hide_osd()


def test_initial_state(panel):
    assert panel.visible is False
    assert panel.osd_type == ""
    assert panel.interval_ms == 2000
    assert panel.applets == []


def test_show_text_makes_visible(panel):
    panel.show_text("AudioUp")
    assert panel.visible is True
    assert panel.osd_type == "AudioUp"
    assert panel.timer_active is True


def test_interval_depends_on_text(panel):
    panel.show_text("SwitchWM3D")
    assert panel.interval_ms == 2000
    panel.show_text("AudioUp")
    assert panel.interval_ms == 1000


def test_hide_osd(panel):
    panel.show_text("AudioUp")
    panel.hide_osd()
    assert panel.visible is False
    assert panel.timer_active is False


def test_visible_changed_only_on_change(panel):
    events = []
    panel.visible_changed.connect(lambda: events.append(panel.visible))
    panel.show_text("AudioUp")
    panel.show_text("AudioDown")
    panel.hide_osd()
    panel.hide_osd()
    assert events == [True, False]


def test_osd_type_changed_emits_every_time(panel):
    types = []
    panel.osd_type_changed.connect(types.append)
    panel.show_text("AudioUp")
    panel.show_text("AudioUp")
    assert types == ["AudioUp", "AudioUp"]


def test_timer_hides_osd(panel):
    hidden = threading.Event()
    panel.visible_changed.connect(lambda: None if panel.visible else hidden.set())
    panel.show_text("AudioUp")
    assert hidden.wait(5.0) is True
    assert panel.visible is False
    assert panel.timer_active is False