from django.apps import AppConfig


class DvcConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "dvc"
    verbose_name = "Disney Vacation Club"

    def ready(self) -> None:
        from dvc import signals  # noqa: F401
