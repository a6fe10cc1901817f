from django.db import models

from apps.domains.rounds.models import Round


class Material(models.Model):
    """
    회차별 원본 강의 자료 (시험지 PDF)

    - 회차당 1개 (round OneToOne)
    - 파일 바이트는 객체 스토리지(file_key)에 있고 여기는 메타만
    - 업로드 후 변경하지 않는다
    """

    round = models.OneToOneField(
        Round,
        on_delete=models.CASCADE,
        related_name="material",
    )

    material_name = models.CharField(max_length=255)

    file_key = models.CharField(max_length=500)
    file_url = models.URLField(max_length=1000, blank=True)
    total_pages = models.PositiveIntegerField(default=0)

    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "materials"
        ordering = ["-uploaded_at", "-id"]

    def __str__(self):
        return self.material_name
