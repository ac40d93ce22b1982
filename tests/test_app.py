"""
Tests for the Streamlit decoder page.
"""

from pathlib import Path

import pytest

pytest.importorskip("streamlit")

from streamlit.testing.v1 import AppTest  # noqa: E402

APP_PATH = Path(__file__).resolve().parents[1] / "curl_decoder" / "app.py"


def run_app(command, part="all"):
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    at.text_area(key="curl_input").input(command)
    at.selectbox(key="part").select(part)
    at.button(key="decode").click()
    at.run()
    return at


def test_decodes_command():
    at = run_app("curl 'https://example.com/api?x=1' -H 'Accept: */*' -d 'a=b'")
    assert not at.exception
    assert len(at.error) == 0
    assert '"method": "POST"' in at.code[0].value


def test_shows_parse_error():
    at = run_app("wget 'https://example.com'")
    assert not at.exception
    assert "Not a curl command" in at.error[0].value


def test_warns_about_unparsed_input():
    at = run_app("curl 'https://example.com' -v leftover", part="flag")
    assert not at.exception
    assert any("leftover" in w.value for w in at.warning)
