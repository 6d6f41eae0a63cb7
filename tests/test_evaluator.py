"""Tests for the evaluator."""

import pytest

from siteguard.modules.checks import (
    CHECK_NAMES,
    Classification,
    DocumentCheck,
    HeaderCheck,
    Verdict,
    create_default_checks,
)
from siteguard.modules.evaluator import (
    Evaluator,
    FetchedPage,
    FetchFailure,
    Unreachable,
)


def _page(make_response, make_document, headers=None, body=""):
    return FetchedPage(
        url="https://example.com",
        headers=make_response(headers),
        document=make_document(body),
        status_code=200,
    )


class RecordingHeaderCheck(HeaderCheck):
    name = "Recording Header"

    def __init__(self):
        self.received = None

    def evaluate(self, headers):
        self.received = headers
        return Verdict.pass_("ok")


class RecordingDocumentCheck(DocumentCheck):
    name = "Recording Document"

    def __init__(self):
        self.received = None

    def evaluate(self, document):
        self.received = document
        return Verdict.warn("hmm")


class TestEvaluator:
    """Test check orchestration for one site."""

    def test_default_check_names_in_fixed_order(self):
        assert Evaluator().check_names == [
            "STS",
            "Frame Options",
            "XSS Protection",
            "Content-Type Options",
            "CSP",
            "Mixed Content",
        ]
        assert list(CHECK_NAMES) == Evaluator().check_names

    def test_result_keys_follow_declared_order(self, make_response, make_document):
        result = Evaluator().evaluate(_page(make_response, make_document))
        assert list(result) == list(CHECK_NAMES)

    def test_result_for_secure_site(self, make_response, make_document, secure_headers):
        result = Evaluator().evaluate(
            _page(make_response, make_document, secure_headers, '<img src="/logo.png">')
        )
        classifications = {name: verdict.classification for name, verdict in result.items()}
        assert classifications == {
            "STS": Classification.PASS,
            "Frame Options": Classification.PASS,
            "XSS Protection": Classification.PASS,
            "Content-Type Options": Classification.PASS,
            "CSP": Classification.FAIL,
            "Mixed Content": Classification.PASS,
        }

    def test_fetch_failure_is_unreachable(self):
        result = Evaluator().evaluate(FetchFailure(url="https://x", reason="ConnectTimeout"))
        assert isinstance(result, Unreachable)
        assert not isinstance(result, dict)
        assert result.reason == "ConnectTimeout"

    def test_all_failures_is_not_unreachable(self, make_response, make_document):
        result = Evaluator().evaluate(_page(make_response, make_document))
        assert isinstance(result, dict)
        assert result["STS"].classification == Classification.FAIL

    def test_dispatches_on_input_kind(self, make_response, make_document):
        header_check = RecordingHeaderCheck()
        document_check = RecordingDocumentCheck()
        page = _page(make_response, make_document)

        result = Evaluator([document_check, header_check]).evaluate(page)

        assert header_check.received is page.headers
        assert document_check.received is page.document
        assert list(result) == ["Recording Document", "Recording Header"]

    def test_custom_order_is_preserved(self, make_response, make_document):
        checks = list(reversed(create_default_checks()))
        result = Evaluator(checks).evaluate(_page(make_response, make_document))
        assert list(result) == list(reversed(CHECK_NAMES))

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            Evaluator([RecordingHeaderCheck(), RecordingHeaderCheck()])
