"""
학생 전화번호 정규화 모듈

성적/명단은 학생을 전화번호로 식별한다. 입력 경로마다 형식이 달라서
(010-1234-5678, 01012345678, +82 10-1234-5678) 저장/조회 모두
숫자만 남긴 국내 형식으로 맞춘다.
"""

import re
from typing import Optional





def normalize_phone(phone: Optional[str]) -> Optional[str]:
    """
    >>> normalize_phone("010-1234-5678")
    '01012345678'
    >>> normalize_phone("+82 10-1234-5678")
    '01012345678'
    >>> normalize_phone("  ")
    """
    if phone is None:
        return None

    digits = re.sub(r"[\s\-\(\)\.]", "", str(phone).strip())
    if digits.startswith("+82"):
        digits = "0" + digits[3:]
    elif digits.startswith("82") and len(digits) >= 11:
        digits = "0" + digits[2:]

    digits = re.sub(r"\D", "", digits)
    return digits or None
