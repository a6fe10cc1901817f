from .material import MaterialSerializer, MaterialUploadSerializer
from .region import QuestionRegionSerializer, RegionInputSerializer, DefineRegionsSerializer
from .note_image import NoteImageSerializer

__all__ = [
    "MaterialSerializer",
    "MaterialUploadSerializer",
    "QuestionRegionSerializer",
    "RegionInputSerializer",
    "DefineRegionsSerializer",
    "NoteImageSerializer",
]
