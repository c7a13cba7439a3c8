from django.apps import AppConfig


class SuspectsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "suspects"
    verbose_name = "Suspects"
