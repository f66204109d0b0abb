# vitrine/presentation/hooks.py
"""
Ganchos (hooks) das ações da loja.

Envolvem os casos de uso com o que a interface precisa depois de cada chamada:
invalidação das consultas em cache e notificações (toasts) via
django.contrib.messages.
"""
import logging
from typing import Any, Callable, Iterable, List, Optional

from django.conf import settings
from django.contrib import messages
from django.core.cache import cache

from vitrine.core.entities import Resultado
from vitrine.core.exceptions import BaseErroCore

logger = logging.getLogger(__name__)


# ====================================================================
# CHAVES DAS CONSULTAS
# ====================================================================

def chave_carrinho(usuario_id) -> str:
    return f"vitrine:carrinho:{usuario_id}"


def chave_enderecos(usuario_id) -> str:
    return f"vitrine:enderecos:{usuario_id}"


def chaves_da_sessao(sessao, *fabricas) -> List[str]:
    """Chaves de cache do usuário da sessão (nenhuma sem sessão)."""
    if sessao is None:
        return []
    return [fabrica(sessao.usuario.id) for fabrica in fabricas]


# ====================================================================
# MUTAÇÕES E CONSULTAS
# ====================================================================

def usar_mutacao(
    request,
    acao: Callable[[], Any],
    invalidar: Iterable[str] = (),
    sucesso: Optional[str] = None,
    erro: Optional[str] = None,
) -> Any:
    """
    Executa uma ação de escrita.

    Em caso de sucesso, invalida as chaves de cache informadas e publica a
    mensagem de sucesso. Erros da Core publicam a mensagem de erro e são
    propagados sem invalidar nada.
    """
    try:
        resultado = acao()
    except BaseErroCore as e:
        logger.info("Ação falhou: %s", e.message)
        if erro:
            messages.error(request, erro)
        raise

    chaves = list(invalidar)
    if chaves:
        cache.delete_many(chaves)
    if sucesso:
        messages.success(request, sucesso)
    return resultado


def usar_consulta(chave: str, consulta: Callable[[], Any]) -> Any:
    """
    Executa uma consulta com cache. Apenas resultados de sucesso são guardados;
    um Resultado de falha é devolvido ao chamador sem ir para o cache.
    """
    em_cache = cache.get(chave)
    if em_cache is not None:
        return em_cache

    resultado = consulta()
    if isinstance(resultado, Resultado) and not resultado.sucesso:
        return resultado

    cache.set(chave, resultado, settings.CACHE_TIMEOUT_CONSULTAS)
    return resultado
