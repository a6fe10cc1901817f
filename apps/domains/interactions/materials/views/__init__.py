from .material import MaterialUploadView, MaterialListView, MaterialDetailView
from .region import DefineRegionsView
from .note_image import NoteImageGenerateView

__all__ = [
    "MaterialUploadView",
    "MaterialListView",
    "MaterialDetailView",
    "DefineRegionsView",
    "NoteImageGenerateView",
]
