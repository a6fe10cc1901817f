import pytest
from io import BytesIO
from typing import Dict, List, Sequence, Tuple

from reportlab.pdfgen import canvas

from academy.domain.materials.errors import DocumentStorageError


A4_POINTS = (595.28, 841.89)
A4_DOUBLE = (1190.56, 1683.78)


def make_pdf(page_sizes: Sequence[Tuple[float, float]]) -> bytes:
    """Build a PDF with one page per (width, height), each page labelled."""
    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=page_sizes[0])
    for i, (w, h) in enumerate(page_sizes, start=1):
        c.setPageSize((w, h))
        c.drawString(40, h - 60, f"page {i}")
        c.rect(100, h - 130, 200, 80)
        c.showPage()
    c.save()
    return buf.getvalue()


class FakeStorage:
    """In-memory DocumentStoragePort that counts calls."""

    def __init__(self, objects: Dict[str, bytes] = None, fail: bool = False):
        self.objects = dict(objects or {})
        self.fail = fail
        self.get_calls: List[str] = []
        self.put_calls: List[str] = []

    def get_object(self, key: str) -> bytes:
        self.get_calls.append(key)
        if self.fail:
            raise DocumentStorageError("storage unavailable", key=key, code="Unavailable")
        if key not in self.objects:
            raise DocumentStorageError(f"missing {key}", key=key, code="NoSuchKey")
        return self.objects[key]

    def put_object(self, key: str, body: bytes, content_type: str = "application/pdf") -> None:
        if self.fail:
            raise DocumentStorageError("storage unavailable", key=key, code="Unavailable")
        self.put_calls.append(key)
        self.objects[key] = body

    def object_url(self, key: str) -> str:
        return f"https://storage.test/{key}"


@pytest.fixture
def two_page_pdf() -> bytes:
    return make_pdf([A4_POINTS, A4_POINTS])


@pytest.fixture
def fake_storage():
    return FakeStorage()


@pytest.fixture
def pdf_factory():
    return make_pdf


@pytest.fixture
def storage_factory():
    return FakeStorage
