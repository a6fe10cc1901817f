from django.urls import path

from .views import RoundCreateView, RoundListView

urlpatterns = [
    path("list", RoundListView.as_view(), name="round-list"),
    path("create", RoundCreateView.as_view(), name="round-create"),
]
