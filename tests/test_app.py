"""Tests for the Streamlit page."""

from streamlit.testing.v1 import AppTest


def _meter(at):
    return [m.value for m in at.markdown if "Strength:" in m.value]


class TestStrengthMeter:
    def test_shown_after_generate(self):
        at = AppTest.from_file("../app.py").run()
        assert _meter(at) == []

        at.button(key="generate").click().run()
        assert len(at.code[0].value) == 16
        # 16 chars from the full 94-character alphabet
        assert "Strong" in _meter(at)[0]
        assert "104.9 bits" in _meter(at)[0]

    def test_settings_change_keeps_rating_of_shown_password(self):
        at = AppTest.from_file("../app.py").run()
        at.button(key="generate").click().run()
        pwd, meter = at.code[0].value, _meter(at)

        at.radio[0].set_value("PIN").run()
        assert at.code[0].value == pwd
        assert _meter(at) == meter

        at.slider[0].set_value(4).run()
        assert _meter(at) == meter
