"""
문항 영역 좌표 변환

편집기는 기준 폭(A4 세로 595.28pt)으로 렌더링한 미리보기 위에서
좌상단 원점으로 영역을 그린다. PDF 페이지는 좌하단 원점이고
실제 폭이 기준 폭과 다를 수 있으므로, 배율 보정 후 y축을 뒤집는다.
"""
from __future__ import annotations

from academy.domain.materials.entities import CropBox, PageSize, Region

# A4 portrait width in points
REFERENCE_PAGE_WIDTH = 595.28


def page_scale(page: PageSize, reference_width: float = REFERENCE_PAGE_WIDTH) -> float:
    if reference_width <= 0:
        raise ValueError("reference_width must be positive")
    return float(page.width) / float(reference_width)


def transform_region(
    region: Region,
    page: PageSize,
    reference_width: float = REFERENCE_PAGE_WIDTH,
) -> CropBox:
    """기준 좌표계(좌상단) Region -> 실제 페이지 좌표계(좌하단) CropBox."""
    scale = page_scale(page, reference_width)

    width = float(region.width) * scale
    height = float(region.height) * scale
    x = float(region.x) * scale
    y = float(page.height) - float(region.y) * scale - height

    return CropBox(x=x, y=y, width=width, height=height)
