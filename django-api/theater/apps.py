from django.apps import AppConfig


class TheaterConfig(AppConfig):
    name = "theater"
    verbose_name = "Theater statements"
