# apps/api/v1/urls.py
from django.urls import path, include

urlpatterns = [
    # =========================
    # Domain APIs
    # =========================
    path("rounds/", include("apps.domains.rounds.urls")),
    path("materials/", include("apps.domains.interactions.materials.urls.urls")),
]
