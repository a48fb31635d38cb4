from django.apps import AppConfig


class BandConfig(AppConfig):
    name = "band"
    verbose_name = "Vintage Group site"
