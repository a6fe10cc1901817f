"""
도메인 공통: 항목 단위 처리 결과 타입 (외부 라이브러리 없음)

배치 작업에서 한 항목의 실패가 전체를 막지 않도록
성공(Ok) / 실패(Err)를 값으로 돌려준다.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    message: str
    code: str = "error"
    # 실패한 항목 식별자 (예: 문항 번호)
    key: object = None


Result = Union[Ok[T], Err]
