"""
성적의 오답 문항 텍스트("3,7,15") 파싱 — 순수 파이썬
"""
from __future__ import annotations

import re
from typing import List, Optional

# parseInt 처럼 앞쪽 정수 부분만 인정 ("7번" -> 7, "x" -> 버림)
_LEADING_INT = re.compile(r"^[+-]?\d+")


def parse_wrong_questions(text: Optional[str]) -> List[int]:
    """
    쉼표로 구분된 오답 문항 텍스트를 문항 번호 목록으로 변환.

    - 각 토큰은 trim 후 정수로 해석
    - 해석 불가 / 0 이하 토큰은 조용히 버림 (오류 아님)
    - 중복 제거 + 오름차순

    >>> parse_wrong_questions("3, 7, x, -2, 15")
    [3, 7, 15]
    >>> parse_wrong_questions(None)
    []
    """
    if not text:
        return []

    numbers = set()
    for token in str(text).split(","):
        m = _LEADING_INT.match(token.strip())
        if not m:
            continue
        n = int(m.group(0))
        if n > 0:
            numbers.add(n)

    return sorted(numbers)
