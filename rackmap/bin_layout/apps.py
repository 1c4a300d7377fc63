from django.apps import AppConfig


class BinLayoutConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'bin_layout'
    verbose_name = 'Bin Layout'

    def ready(self):
        from . import conf
        conf.register_defaults()
