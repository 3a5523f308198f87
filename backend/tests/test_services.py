"""
Tests for publishing, code analysis and logging setup.
"""
import logging

from chatforge.logging_config import configure_logging
from chatforge.services.code_analysis import analyze_code
from chatforge.services.publish_service import publish_project


def test_publish_synthesizes_url():
    result = publish_project("abc", "Todo")

    assert result.success is True
    assert result.url.endswith("/abc")
    assert "Todo" in result.message


def test_analyze_scores_plain_code():
    analysis = analyze_code("x = 1\ny = 2")

    assert analysis.line_count == 2
    assert analysis.score == 50
    assert analysis.quality == "needs improvement"


def test_analyze_scores_documented_functions():
    analysis = analyze_code("# add\ndef add(a, b):\n    return a + b")

    assert analysis.has_comments
    assert analysis.has_functions
    assert not analysis.has_error_handling
    assert analysis.score == 80
    assert analysis.quality == "excellent"


def test_configure_logging_installs_one_handler():
    root = logging.getLogger()
    before = len(root.handlers)
    level = root.level

    configure_logging("DEBUG")
    configure_logging("WARNING")

    assert len(root.handlers) <= before + 1
    assert root.level == logging.WARNING
    root.setLevel(level)
