"""
Context processors para a aplicação presentation.
"""
import logging

from vitrine.core.dependency_injection import get_obter_carrinho_use_case, get_provedor_sessao
from vitrine.core.exceptions import BaseErroCore

from .hooks import chave_carrinho, usar_consulta

logger = logging.getLogger(__name__)


def carrinho_context(request):
    """
    Adiciona o resumo do carrinho (quantidade e total) ao contexto global dos templates.
    """
    sessao = get_provedor_sessao().obter_sessao(request)
    if sessao is None:
        return {'quantidade_itens_carrinho': 0}

    obter_uc = get_obter_carrinho_use_case()
    try:
        carrinho = usar_consulta(chave_carrinho(sessao.usuario.id), lambda: obter_uc.executar(sessao))
    except BaseErroCore as e:
        # Em caso de erro, o cabeçalho é exibido sem o resumo do carrinho
        logger.warning("Erro ao carregar o resumo do carrinho: %s", e.message)
        return {'quantidade_itens_carrinho': 0}

    return {
        'quantidade_itens_carrinho': carrinho.quantidade_total,
        'total_carrinho': carrinho.total_formatado,
    }
