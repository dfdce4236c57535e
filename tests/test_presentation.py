from json_classifier.classifier import ApiResponseError, ClassificationResult
from json_classifier.ui.presentation import ErrorView, ResultView, render_outcome
from json_classifier.ui.state import Failure, Pending, Success


def test_positive_result_shows_yes_and_reasoning() -> None:
    outcome = Success(ClassificationResult(has_quantitative_data=True, reasoning="reports Km = 5 μM"))
    view = render_outcome(outcome)

    assert isinstance(view, ResultView)
    assert view.verdict_line == "Contains Quantitative Data: Yes"
    assert view.reasoning == "reports Km = 5 μM"
    markdown = view.as_markdown()
    assert "**Contains Quantitative Data:** Yes" in markdown
    assert "reports Km = 5 μM" in markdown


def test_negative_result_without_reasoning_omits_block() -> None:
    view = render_outcome(Success(ClassificationResult(has_quantitative_data=False)))

    assert view.verdict == "No"
    assert view.reasoning is None
    assert "Reasoning" not in view.as_markdown()


def test_empty_reasoning_is_treated_as_absent() -> None:
    view = render_outcome(Success(ClassificationResult(has_quantitative_data=False, reasoning="")))
    assert "Reasoning" not in view.as_markdown()


def test_reasoning_whitespace_is_preserved() -> None:
    reasoning = "Line one.\n\n    Indented ``code`` line.\n```"
    view = render_outcome(Success(ClassificationResult(has_quantitative_data=True, reasoning=reasoning)))
    markdown = view.as_markdown()

    assert reasoning in markdown
    assert "````text" in markdown
    assert markdown.endswith("\n````")


def test_error_outcome_shows_message_and_details_only() -> None:
    view = render_outcome(Failure(ApiResponseError(message="API Error 500: INTERNAL", details="Backend unavailable")))

    assert view == ErrorView(message="API Error 500: INTERNAL", details="Backend unavailable")
    markdown = view.as_markdown()
    assert markdown.startswith("**Error!** API Error 500: INTERNAL")
    assert "Backend unavailable" in markdown
    assert "Contains Quantitative Data" not in markdown


def test_error_without_details() -> None:
    view = render_outcome(Failure(ApiResponseError(message="Gemini API returned an empty response.")))
    assert view.as_markdown() == "**Error!** Gemini API returned an empty response."


def test_nothing_rendered_before_first_submission() -> None:
    assert render_outcome(Pending()) is None
    assert render_outcome(None) is None


def test_rendering_is_deterministic() -> None:
    outcome = Success(ClassificationResult(has_quantitative_data=True, reasoning="n=3, p < 0.05"))
    assert render_outcome(outcome) == render_outcome(outcome)
    assert render_outcome(outcome).as_markdown() == render_outcome(outcome).as_markdown()
