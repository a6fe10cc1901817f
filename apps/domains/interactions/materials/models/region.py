from django.db import models

from .material import Material


class QuestionRegion(models.Model):
    """
    자료 위 문항 1개의 위치

    좌표는 편집기 기준 좌표계(좌상단 원점, A4 세로 폭 595.28pt 기준).
    page_number는 1부터.
    편집기 저장 시 자료 단위로 전체 삭제 후 전체 삽입된다.
    """

    material = models.ForeignKey(
        Material,
        on_delete=models.CASCADE,
        related_name="regions",
    )

    question_number = models.PositiveIntegerField()
    page_number = models.PositiveIntegerField()

    x = models.FloatField()
    y = models.FloatField()
    width = models.FloatField()
    height = models.FloatField()

    class Meta:
        db_table = "question_regions"
        unique_together = ("material", "question_number")
        ordering = ["question_number"]

    def __str__(self):
        return f"{self.material} Q{self.question_number} (p.{self.page_number})"
