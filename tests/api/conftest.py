import pytest
from rest_framework.test import APIClient

from apps.domains.interactions.materials.models import Material, QuestionRegion
from apps.domains.interactions.materials.services import note_images
from apps.domains.rounds.models import Round
from apps.domains.scores.models import Score


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def use_storage(monkeypatch):
    """Route every S3 access in the request through the given fake."""

    def _use(storage):
        monkeypatch.setattr(note_images, "build_document_storage", lambda: storage)
        return storage

    return _use


@pytest.fixture
def round5(db):
    return Round.objects.create(class_name="고1 A반", round_number=5)


@pytest.fixture
def material5(round5):
    return Material.objects.create(
        round=round5,
        material_name="5회차 시험지",
        file_key="materials/1700000000000_round5.pdf",
        file_url="https://storage.test/materials/1700000000000_round5.pdf",
        total_pages=2,
    )


@pytest.fixture
def add_regions():
    def _add(material, *rows):
        for q, page in rows:
            QuestionRegion.objects.create(
                material=material, question_number=q, page_number=page,
                x=100, y=50 + q, width=200, height=80,
            )
    return _add


@pytest.fixture
def add_score():
    def _add(round_obj, phone, wrong, **extra):
        return Score.objects.create(
            class_name=round_obj.class_name,
            round=round_obj.round_number,
            phone=phone,
            student_name=extra.pop("student_name", "김학생"),
            wrong_questions=wrong,
            **extra,
        )
    return _add
