from django.apps import AppConfig


class HomiesConfig(AppConfig):
    """Configuration for the Homies events application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "homies"
    verbose_name = "Homies Events"
