from django.apps import AppConfig


class RoundsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"

    name = "apps.domains.rounds"

    # migration / FK 참조용 앱 라벨 (변경 금지)
    label = "rounds"
