"""
Streamlit page that sends pasted JSON to the classification API and shows the verdict.
"""

from __future__ import annotations

import streamlit as st

from json_classifier.logging_utils import setup_logging
from json_classifier.ui.api_client import ClassifierApiClient
from json_classifier.ui.presentation import ErrorView, render_outcome
from json_classifier.ui.state import ClassifierSession

_PLACEHOLDER = (
    'E.g., {"title": "Thermostable PETase variant", '
    '"text_content": "The variant showed a Tm of 71.2 ± 0.3 °C (n=3)..."}'
)


def main() -> None:
    setup_logging()
    st.set_page_config(page_title="JSON Text Classifier", layout="wide")
    st.title("JSON Text Classifier")
    st.caption(
        "Paste a JSON document below to check whether its text reports quantitative "
        "experimental data. The content is analyzed by the Gemini API."
    )

    session = _session()
    client = _client()

    form_col, log_col = st.columns([2, 1], gap="large")

    with form_col:
        with st.form("json_input_form"):
            st.text_area(
                "Enter JSON Data:",
                key="json_input",
                height=250,
                placeholder=_PLACEHOLDER,
                disabled=session.busy,
            )
            st.form_submit_button("Classify Text", on_click=_queue_submission, disabled=session.busy)

        # The widgets above were drawn disabled; the request runs in this pass.
        if session.busy:
            with st.spinner("Classifying..."):
                session.resolve(client.classify)
            st.session_state.pipeline_logs = list(client.last_logs)
            st.session_state.pipeline_markdown = client.last_log_markdown
            st.rerun()

        if session.input_error:
            st.error(session.input_error)

        _render_outcome(session)

    with log_col:
        _render_log_panel()

    st.caption("Powered by Gemini API, FastAPI & Streamlit")


def _queue_submission() -> None:
    _session().begin(st.session_state.get("json_input", ""))


def _session() -> ClassifierSession:
    if "classifier_session" not in st.session_state:
        st.session_state.classifier_session = ClassifierSession()
    return st.session_state.classifier_session


def _client() -> ClassifierApiClient:
    if "api_client" not in st.session_state:
        st.session_state.api_client = ClassifierApiClient()
    return st.session_state.api_client


def _render_outcome(session: ClassifierSession) -> None:
    view = render_outcome(session.outcome)
    if view is None:
        return
    st.divider()
    if isinstance(view, ErrorView):
        st.error(view.as_markdown())
    else:
        st.markdown(view.as_markdown())


def _render_log_panel() -> None:
    st.subheader("Processing steps")
    logs = st.session_state.get("pipeline_logs") or []
    if logs:
        st.code("\n".join(logs))
        markdown = st.session_state.get("pipeline_markdown") or ""
        if markdown:
            st.download_button(
                "Download pipeline trace",
                data=markdown,
                file_name="classification_logs.md",
                mime="text/markdown",
            )
    else:
        st.info("No logs yet. Submit a document to view the processing steps.")


if __name__ == "__main__":
    main()
