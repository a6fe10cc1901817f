from django.urls import path

from ..views import (
    DefineRegionsView,
    MaterialDetailView,
    MaterialListView,
    MaterialUploadView,
    NoteImageGenerateView,
)

urlpatterns = [
    path("upload", MaterialUploadView.as_view(), name="material-upload"),
    path("list", MaterialListView.as_view(), name="material-list"),
    path("define-regions", DefineRegionsView.as_view(), name="material-define-regions"),
    path("generate-note-images", NoteImageGenerateView.as_view(), name="material-generate-note-images"),
    path("<int:material_id>", MaterialDetailView.as_view(), name="material-detail"),
]
