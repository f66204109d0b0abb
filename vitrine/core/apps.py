# vitrine/core/apps.py

from django.apps import AppConfig

class CoreConfig(AppConfig):
    # O nome completo do path da aplicação
    name = 'vitrine.core'
    # Define o label curto para referência (ex: no shell ou migrações)
    label = 'core'
    verbose_name = 'Camada de Entidades e Lógica (Core)'

    # Esta camada não possui modelos de banco de dados (Infrastructure cuida disso).
    default_auto_field = 'django.db.models.BigAutoField'
