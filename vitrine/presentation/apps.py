from django.apps import AppConfig


class PresentationConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'vitrine.presentation'
    label = 'presentation' # Define um label para evitar conflitos de nomes

    def ready(self):
        # Registra os receivers que mantêm o carrinho em cache coerente com o banco
        from . import signals  # noqa: F401
