from django.db import models

from apps.api.common.models import TimestampModel


# ========================================================
# Round (분반별 회차)
# ========================================================

class Round(TimestampModel):
    """
    분반(class_name)의 n회차.

    오답노트의 단일 스코프 키:
    - 성적은 (class_name, round_number)로
    - 강의 자료(Material)는 round_id로 연결된다.
    """

    class_name = models.CharField(max_length=100)
    round_number = models.PositiveIntegerField()
    round_name = models.CharField(max_length=100, blank=True)

    class Meta:
        db_table = "rounds"
        unique_together = ("class_name", "round_number")
        ordering = ["class_name", "round_number"]

    def save(self, *args, **kwargs):
        if not self.round_name:
            self.round_name = default_round_name(self.round_number)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.class_name} - {self.round_name or self.round_number}"


def default_round_name(round_number) -> str:
    return f"정규 {round_number}회차"
