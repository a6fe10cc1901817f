import base64
from io import BytesIO

import pytest
from PyPDF2 import PdfReader

pytestmark = pytest.mark.django_db

URL = "/api/v1/materials/generate-note-images"
PHONE = "010-1234-5678"


@pytest.fixture
def storage(use_storage, storage_factory, two_page_pdf, material5):
    return use_storage(storage_factory({material5.file_key: two_page_pdf}))


def test_generates_only_wrong_questions_in_order(api_client, storage, round5, material5, add_regions, add_score):
    add_regions(material5, (15, 1), (7, 1), (3, 1))
    add_score(round5, PHONE, "7, 3")

    res = api_client.get(URL, {"studentPhone": PHONE, "roundId": round5.id})

    assert res.status_code == 200
    body = res.json()
    assert [item["question_number"] for item in body] == [3, 7]
    assert storage.get_calls == [material5.file_key]
    assert "X-Skipped-Questions" not in res

    prefix = "data:application/pdf;base64,"
    for item in body:
        assert item["imageData"].startswith(prefix)
        reader = PdfReader(BytesIO(base64.b64decode(item["imageData"][len(prefix):])))
        assert len(reader.pages) == 1


def test_class_name_and_round_resolve_same_scope(api_client, storage, round5, material5, add_regions, add_score):
    add_regions(material5, (3, 2))
    add_score(round5, "01012345678", "3")

    res = api_client.get(URL, {"studentPhone": PHONE, "className": "고1 A반", "round": 5})

    assert res.status_code == 200
    assert [item["question_number"] for item in res.json()] == [3]


def test_other_class_same_round_number_is_not_mixed(api_client, storage, round5, material5, add_regions, add_score):
    from apps.domains.rounds.models import Round

    other = Round.objects.create(class_name="고1 B반", round_number=5)
    add_regions(material5, (3, 1))
    add_score(other, PHONE, "3")

    res = api_client.get(URL, {"studentPhone": PHONE, "roundId": round5.id})

    assert res.json() == []
    assert storage.get_calls == []


def test_no_score_returns_empty_without_fetch(api_client, storage, round5, material5, add_regions):
    add_regions(material5, (3, 1))

    res = api_client.get(URL, {"studentPhone": PHONE, "roundId": round5.id})

    assert res.status_code == 200
    assert res.json() == []
    assert storage.get_calls == []


def test_no_regions_returns_empty(api_client, storage, round5, material5, add_score):
    add_score(round5, PHONE, "3,7")

    res = api_client.get(URL, {"studentPhone": PHONE, "roundId": round5.id})

    assert res.json() == []
    assert storage.get_calls == []


def test_unknown_round_returns_empty(api_client, storage):
    res = api_client.get(URL, {"studentPhone": PHONE, "roundId": 999})

    assert res.status_code == 200
    assert res.json() == []


@pytest.mark.parametrize(
    "params",
    [
        {"roundId": 1},
        {"studentPhone": PHONE},
        {"studentPhone": PHONE, "className": "고1 A반"},
        {"studentPhone": PHONE, "round": 5},
    ],
)
def test_missing_params_is_400(api_client, params):
    res = api_client.get(URL, params)

    assert res.status_code == 400
    assert "error" in res.json()


def test_non_numeric_round_is_400(api_client):
    res = api_client.get(URL, {"studentPhone": PHONE, "roundId": "abc"})
    assert res.status_code == 400


def test_storage_failure_is_500(api_client, use_storage, storage_factory, round5, material5, add_regions, add_score):
    storage = use_storage(storage_factory(fail=True))
    add_regions(material5, (3, 1))
    add_score(round5, PHONE, "3")

    res = api_client.get(URL, {"studentPhone": PHONE, "roundId": round5.id})

    assert res.status_code == 500
    assert res.json() == {"error": "오답노트 생성 중 오류가 발생했습니다."}
    assert len(storage.get_calls) == 1


def test_broken_document_is_500(api_client, use_storage, storage_factory, round5, material5, add_regions, add_score):
    use_storage(storage_factory({material5.file_key: b"not a pdf"}))
    add_regions(material5, (3, 1))
    add_score(round5, PHONE, "3")

    res = api_client.get(URL, {"studentPhone": PHONE, "roundId": round5.id})

    assert res.status_code == 500


def test_region_past_last_page_is_skipped(api_client, storage, round5, material5, add_regions, add_score):
    add_regions(material5, (3, 1), (9, 4), (12, 2))
    add_score(round5, PHONE, "3,9,12")

    res = api_client.get(URL, {"studentPhone": PHONE, "roundId": round5.id})

    assert res.status_code == 200
    assert [item["question_number"] for item in res.json()] == [3, 12]
    assert res["X-Skipped-Questions"] == "9"


@pytest.fixture
def no_bucket(settings, monkeypatch):
    settings.S3_BUCKET_NAME = None
    monkeypatch.delenv("S3_BUCKET_NAME", raising=False)


def test_empty_result_does_not_need_storage_config(api_client, no_bucket, round5, material5, add_regions):
    add_regions(material5, (3, 1))

    res = api_client.get(URL, {"studentPhone": PHONE, "roundId": round5.id})

    assert res.status_code == 200
    assert res.json() == []


def test_no_matching_regions_does_not_need_storage_config(api_client, no_bucket, round5, material5, add_score):
    add_score(round5, PHONE, "3,7")

    res = api_client.get(URL, {"studentPhone": PHONE, "roundId": round5.id})

    assert res.status_code == 200
    assert res.json() == []
