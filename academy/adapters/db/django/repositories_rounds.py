"""
Round 조회 — 요청 파라미터(roundId 또는 className+round)를 단일 스코프 키로 확정.
"""
from __future__ import annotations

from typing import Optional

from academy.domain.materials.entities import RoundScope


def _to_scope(obj) -> RoundScope:
    return RoundScope(
        round_id=int(obj.id),
        class_name=str(obj.class_name),
        round_number=int(obj.round_number),
    )


def round_scope_get(
    *,
    round_id: Optional[int] = None,
    class_name: Optional[str] = None,
    round_number: Optional[int] = None,
) -> Optional[RoundScope]:
    """roundId 우선. 없으면 (className, round). 못 찾으면 None."""
    from apps.domains.rounds.models import Round

    if round_id is not None:
        obj = Round.objects.filter(id=int(round_id)).first()
    elif class_name and round_number is not None:
        obj = Round.objects.filter(class_name=class_name, round_number=int(round_number)).first()
    else:
        return None
    return _to_scope(obj) if obj else None
