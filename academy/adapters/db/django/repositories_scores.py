"""
Score 조회 — ScoreLookupPort 구현
"""
from __future__ import annotations

from typing import Optional

from academy.application.ports.repositories import ScoreLookupPort
from academy.domain.materials.entities import RoundScope
from libs.phone_util import normalize_phone


def score_get_wrong_questions(phone: str, class_name: str, round_number: int) -> Optional[str]:
    from apps.domains.scores.models import Score
    return (
        Score.objects
        .filter(phone=normalize_phone(phone) or "", class_name=class_name, round=int(round_number))
        .values_list("wrong_questions", flat=True)
        .first()
    )


class DjangoScoreLookup(ScoreLookupPort):

    def get_wrong_questions_text(self, student_phone: str, scope: RoundScope) -> Optional[str]:
        return score_get_wrong_questions(student_phone, scope.class_name, scope.round_number)
