# vitrine/presentation/signals.py
"""
Invalidação do carrinho em cache para escritas feitas fora dos casos de uso
(admin, shell, exclusões em cascata a partir de variantes ou usuários).
"""
import logging

from django.apps import apps
from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from .hooks import chave_carrinho

logger = logging.getLogger(__name__)


def invalidar_carrinho_do_usuario(usuario_id):
    if usuario_id is None:
        return
    cache.delete(chave_carrinho(usuario_id))
    logger.debug("Carrinho em cache do usuário %s invalidado.", usuario_id)


@receiver(post_save, sender='carrinho.Carrinho')
@receiver(post_delete, sender='carrinho.Carrinho')
def carrinho_alterado(sender, instance, **kwargs):
    invalidar_carrinho_do_usuario(instance.usuario_id)


@receiver(post_save, sender='carrinho.ItemCarrinho')
@receiver(post_delete, sender='carrinho.ItemCarrinho')
def item_carrinho_alterado(sender, instance, **kwargs):
    # Na exclusão em cascata do carrinho, a linha dele pode já não existir;
    # nesse caso o receiver do próprio carrinho cuida da invalidação.
    Carrinho = apps.get_model('carrinho', 'Carrinho')
    usuario_id = (
        Carrinho.objects.filter(pk=instance.carrinho_id).values_list('usuario_id', flat=True).first()
    )
    invalidar_carrinho_do_usuario(usuario_id)
