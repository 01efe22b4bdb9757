from django.apps import AppConfig


class LogsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "gridwork.apps.logs"
    verbose_name = "Activity logs"

    def ready(self):
        from . import signals  # noqa: F401 - registers @receiver handlers
