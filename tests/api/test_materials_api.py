import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import IntegrityError

from apps.domains.interactions.materials.models import Material, QuestionRegion
from apps.domains.interactions.materials.services.uploads import build_file_key, upload_material

pytestmark = pytest.mark.django_db

BASE = "/api/v1/materials"


def _pdf_upload(data: bytes, name: str = "round5.pdf"):
    return SimpleUploadedFile(name, data, content_type="application/pdf")


def test_build_file_key():
    assert build_file_key("exam 5.pdf", now_ms=1700000000000) == "materials/1700000000000_exam 5.pdf"
    assert build_file_key("a/b.pdf", now_ms=1) == "materials/1_a_b.pdf"


class TestUpload:

    def test_upload_counts_pages(self, api_client, use_storage, storage_factory, two_page_pdf, round5):
        storage = use_storage(storage_factory())

        res = api_client.post(
            f"{BASE}/upload",
            {"materialFile": _pdf_upload(two_page_pdf), "roundId": round5.id},
            format="multipart",
        )

        assert res.status_code == 201
        material = Material.objects.get(pk=res.json()["materialId"])
        assert material.round_id == round5.id
        assert material.total_pages == 2
        assert material.material_name == "round5.pdf"
        assert material.file_key.startswith("materials/")
        assert material.file_key.endswith("_round5.pdf")
        assert storage.put_calls == [material.file_key]
        assert res.json()["materialUrl"] == f"https://storage.test/{material.file_key}"

    def test_explicit_name_and_pages(self, api_client, use_storage, storage_factory, two_page_pdf, round5):
        use_storage(storage_factory())

        res = api_client.post(
            f"{BASE}/upload",
            {
                "materialFile": _pdf_upload(two_page_pdf),
                "roundId": round5.id,
                "materialName": "5회차 시험지",
                "totalPages": 4,
            },
            format="multipart",
        )

        material = Material.objects.get(pk=res.json()["materialId"])
        assert material.material_name == "5회차 시험지"
        assert material.total_pages == 4

    def test_second_upload_for_round_is_409(self, api_client, use_storage, storage_factory, two_page_pdf, material5):
        storage = use_storage(storage_factory())

        res = api_client.post(
            f"{BASE}/upload",
            {"materialFile": _pdf_upload(two_page_pdf), "roundId": material5.round_id},
            format="multipart",
        )

        assert res.status_code == 409
        assert storage.put_calls == []

    def test_unknown_round_is_404(self, api_client, use_storage, storage_factory, two_page_pdf):
        use_storage(storage_factory())

        res = api_client.post(
            f"{BASE}/upload",
            {"materialFile": _pdf_upload(two_page_pdf), "roundId": 999},
            format="multipart",
        )

        assert res.status_code == 404

    def test_missing_file_is_400(self, api_client, round5):
        res = api_client.post(f"{BASE}/upload", {"roundId": round5.id}, format="multipart")
        assert res.status_code == 400

    def test_unreadable_pdf_is_400(self, api_client, use_storage, storage_factory, round5):
        storage = use_storage(storage_factory())

        res = api_client.post(
            f"{BASE}/upload",
            {"materialFile": _pdf_upload(b"plain text"), "roundId": round5.id},
            format="multipart",
        )

        assert res.status_code == 400
        assert storage.put_calls == []
        assert not Material.objects.exists()

    def test_storage_failure_is_500(self, api_client, use_storage, storage_factory, two_page_pdf, round5):
        use_storage(storage_factory(fail=True))

        res = api_client.post(
            f"{BASE}/upload",
            {"materialFile": _pdf_upload(two_page_pdf), "roundId": round5.id},
            format="multipart",
        )

        assert res.status_code == 500
        assert not Material.objects.exists()


class TestListAndDetail:

    def test_list_includes_round_info(self, api_client, material5):
        res = api_client.get(f"{BASE}/list")

        assert res.status_code == 200
        [row] = res.json()
        assert row["id"] == material5.id
        assert row["class_name"] == "고1 A반"
        assert row["round_number"] == 5

    def test_list_filters_by_class(self, api_client, material5):
        assert api_client.get(f"{BASE}/list", {"className": "고2 B반"}).json() == []
        assert len(api_client.get(f"{BASE}/list", {"roundId": material5.round_id}).json()) == 1

    def test_detail_with_regions(self, api_client, material5, add_regions):
        add_regions(material5, (7, 2), (3, 1))

        res = api_client.get(f"{BASE}/{material5.id}")

        assert res.status_code == 200
        body = res.json()
        assert body["material"]["id"] == material5.id
        assert [r["question_number"] for r in body["regions"]] == [3, 7]

    def test_detail_unknown_is_404(self, api_client):
        assert api_client.get(f"{BASE}/12345").status_code == 404


class TestDefineRegions:

    def _region(self, q, page=1):
        return {"questionNumber": q, "pageNumber": page, "x": 10, "y": 20, "width": 100, "height": 40}

    def test_replaces_existing_regions(self, api_client, material5, add_regions):
        add_regions(material5, (1, 1), (2, 1))

        res = api_client.post(
            f"{BASE}/define-regions",
            {"materialId": material5.id, "regions": [self._region(3), self._region(4, page=2)]},
            format="json",
        )

        assert res.status_code == 200
        assert res.json()["count"] == 2
        numbers = list(
            QuestionRegion.objects.filter(material=material5).values_list("question_number", flat=True)
        )
        assert numbers == [3, 4]

    def test_empty_list_clears(self, api_client, material5, add_regions):
        add_regions(material5, (1, 1))

        res = api_client.post(f"{BASE}/define-regions", {"materialId": material5.id, "regions": []}, format="json")

        assert res.status_code == 200
        assert not QuestionRegion.objects.filter(material=material5).exists()

    def test_duplicate_question_is_400_and_keeps_old(self, api_client, material5, add_regions):
        add_regions(material5, (1, 1))

        res = api_client.post(
            f"{BASE}/define-regions",
            {"materialId": material5.id, "regions": [self._region(3), self._region(3, page=2)]},
            format="json",
        )

        assert res.status_code == 400
        assert list(QuestionRegion.objects.values_list("question_number", flat=True)) == [1]

    def test_missing_material_id_is_400(self, api_client):
        res = api_client.post(f"{BASE}/define-regions", {"regions": []}, format="json")
        assert res.status_code == 400

    def test_unknown_material_is_404(self, api_client, db):
        res = api_client.post(f"{BASE}/define-regions", {"materialId": 999, "regions": []}, format="json")
        assert res.status_code == 404


class TestUploadService:

    def test_given_total_pages_still_requires_pdf(self, api_client, use_storage, storage_factory, round5):
        storage = use_storage(storage_factory())

        res = api_client.post(
            f"{BASE}/upload",
            {"materialFile": _pdf_upload(b"plain text"), "roundId": round5.id, "totalPages": 3},
            format="multipart",
        )

        assert res.status_code == 400
        assert storage.put_calls == []
        assert not Material.objects.exists()

    def test_duplicate_round_never_reaches_storage(self, storage_factory, two_page_pdf, material5):
        storage = storage_factory()

        with pytest.raises(IntegrityError):
            upload_material(
                storage=storage,
                round_id=material5.round_id,
                filename="again.pdf",
                data=two_page_pdf,
            )

        assert storage.put_calls == []
        assert Material.objects.count() == 1
