from pathlib import Path
from typing import List

import streamlit as st
from streamlit.testing.v1 import AppTest

from json_classifier.classifier import ClassificationResult

APP_PATH = str(Path(__file__).resolve().parents[1] / "json_classifier" / "ui" / "streamlit_app.py")
DOCUMENT = '{"text_content": "kcat = 12 s-1"}'


class StubApiClient:
    def __init__(self, halt_during_call: bool = False) -> None:
        self.halt_during_call = halt_during_call
        self.calls: List[str] = []
        self.last_logs = ["Received classification request"]
        self.last_log_markdown = "- Received classification request"

    def classify(self, json_text: str) -> ClassificationResult:
        self.calls.append(json_text)
        if self.halt_during_call:
            # Ends the script run while the request is outstanding, freezing the page as drawn.
            st.stop()
        return ClassificationResult(has_quantitative_data=True, reasoning="Reports kcat.")


def _app(client: StubApiClient) -> AppTest:
    at = AppTest.from_file(APP_PATH, default_timeout=30)
    at.session_state["api_client"] = client
    at.run()
    return at


def test_form_is_enabled_before_submission() -> None:
    at = _app(StubApiClient())
    assert not at.button[0].disabled
    assert not at.text_area(key="json_input").disabled


def test_form_is_disabled_while_request_is_outstanding() -> None:
    client = StubApiClient(halt_during_call=True)
    at = _app(client)

    at.text_area(key="json_input").input(DOCUMENT)
    at.button[0].click()
    at.run()

    assert client.calls == [DOCUMENT]
    assert at.button[0].disabled
    assert at.text_area(key="json_input").disabled


def test_completed_request_renders_result_and_reenables_form() -> None:
    client = StubApiClient()
    at = _app(client)

    at.text_area(key="json_input").input(DOCUMENT)
    at.button[0].click()
    at.run()

    assert client.calls == [DOCUMENT]
    assert not at.button[0].disabled
    assert any("Contains Quantitative Data:** Yes" in block.value for block in at.markdown)
    assert at.session_state["pipeline_logs"] == ["Received classification request"]


def test_invalid_json_is_rejected_without_request() -> None:
    client = StubApiClient()
    at = _app(client)

    at.text_area(key="json_input").input('{"a":}')
    at.button[0].click()
    at.run()

    assert client.calls == []
    assert at.error[0].value == "Invalid JSON format. Please enter valid JSON."
    assert not at.button[0].disabled
