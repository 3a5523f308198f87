import re

from chatforge.schemas.analysis import CodeAnalysis

COMMENT_PATTERN = r"//|/\*|#"
FUNCTION_PATTERN = r"function|def|=>"
ERROR_HANDLING_PATTERN = r"try|catch|except|finally"

BASE_SCORE = 50


def _quality(score: int) -> str:
    if score >= 80:
        return "excellent"
    if score >= 60:
        return "good"
    return "needs improvement"


def analyze_code(code: str) -> CodeAnalysis:
    has_comments = re.search(COMMENT_PATTERN, code) is not None
    has_functions = re.search(FUNCTION_PATTERN, code) is not None
    has_error_handling = re.search(ERROR_HANDLING_PATTERN, code) is not None

    score = BASE_SCORE
    if has_comments:
        score += 15
    if has_functions:
        score += 15
    if has_error_handling:
        score += 20

    return CodeAnalysis(
        line_count=len(code.split("\n")),
        has_comments=has_comments,
        has_functions=has_functions,
        has_error_handling=has_error_handling,
        score=score,
        quality=_quality(score),
    )
