from django.db import models

from apps.api.common.models import TimestampModel
from libs.phone_util import normalize_phone


class Score(TimestampModel):
    """
    회차별 학생 성적 (성적 입력 화면에서 upsert)

    wrong_questions: 틀린 문항 번호 텍스트 ("3,7,15")
    - 채점은 외부 입력이므로 여기서는 텍스트 그대로 보관
    """

    class_name = models.CharField(max_length=100)
    round = models.PositiveIntegerField()
    date = models.DateField(null=True, blank=True)

    student_name = models.CharField(max_length=50, blank=True)
    # 정규화된 번호 (01012345678)
    phone = models.CharField(max_length=20)
    school = models.CharField(max_length=100, blank=True)

    test_score = models.FloatField(null=True, blank=True)
    total_question = models.PositiveIntegerField(null=True, blank=True)
    wrong_questions = models.TextField(blank=True, default="")

    assignment1 = models.CharField(max_length=20, blank=True)
    assignment2 = models.CharField(max_length=20, blank=True)
    memo = models.TextField(blank=True, default="")

    class Meta:
        db_table = "scores"
        unique_together = ("class_name", "round", "phone")
        ordering = ["-date", "round", "student_name"]
        indexes = [
            models.Index(fields=["phone", "class_name", "round"], name="scores_phone_scope_idx"),
        ]

    def save(self, *args, **kwargs):
        self.phone = normalize_phone(self.phone) or ""
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.class_name} {self.round}회차 {self.student_name}({self.phone})"
