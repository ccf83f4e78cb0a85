import pytest

from components.toast import build_toast_html
from services.notifications import TOAST_ICONS


def test_second_toast_replaces_first(notifier):
    notifier.show_toast("Saved", "success")
    notifier.show_toast("Lookup failed", "error")

    active = notifier.active()
    assert active.message == "Lookup failed"
    assert active.severity == "error"
    assert [t.message for t in notifier.history] == ["Saved", "Lookup failed"]


def test_toast_markup_holds_a_single_toast(notifier):
    notifier.show_toast("first", "info")
    notifier.show_toast("second", "warning")

    html = build_toast_html(notifier.active(), notifier.remaining_display())

    assert html.count('class="toast ') == 1
    assert "second" in html
    assert "first" not in html
    assert TOAST_ICONS["warning"] in html


def test_toast_expires_after_display_and_exit(notifier, clock):
    notifier.show_toast("Patient added", "success")

    clock.advance(3.0)
    assert notifier.active() is not None
    assert notifier.remaining_display() == 0.0

    clock.advance(0.29)
    assert notifier.active() is not None

    clock.advance(0.02)
    assert notifier.active() is None
    assert notifier.current is None


def test_remaining_display_counts_down(notifier, clock):
    notifier.show_toast("hello")
    clock.advance(1.25)
    assert notifier.remaining_display() == pytest.approx(1.75)


def test_replacement_restarts_the_timer(notifier, clock):
    notifier.show_toast("one")
    clock.advance(2.5)
    notifier.show_toast("two")
    clock.advance(2.5)

    assert notifier.active().message == "two"


def test_default_severity_is_info(notifier):
    assert notifier.show_toast("heads up").icon == "ℹ"


def test_unknown_severity_is_rejected(notifier):
    with pytest.raises(ValueError):
        notifier.show_toast("oops", "critical")
    assert notifier.current is None


def test_toast_message_is_escaped(notifier):
    toast = notifier.show_toast("<b>Bobby</b> added", "success")
    assert "&lt;b&gt;Bobby&lt;/b&gt;" in build_toast_html(toast, 3.0)
