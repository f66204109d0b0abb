# vitrine/presentation/excecoes.py
"""
Tradução das exceções da Core para respostas HTTP.
"""
import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from vitrine.core.exceptions import (
    AcessoNegadoError,
    BaseErroCore,
    DadosInvalidosError,
    ErroPersistencia,
    ItemNaoEncontradoError,
    NaoAutenticadoError,
)

logger = logging.getLogger(__name__)

STATUS_POR_ERRO = (
    (NaoAutenticadoError, status.HTTP_401_UNAUTHORIZED),
    (DadosInvalidosError, status.HTTP_400_BAD_REQUEST),
    (ItemNaoEncontradoError, status.HTTP_404_NOT_FOUND),
    (AcessoNegadoError, status.HTTP_403_FORBIDDEN),
    (ErroPersistencia, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def status_para_erro(erro: BaseErroCore) -> int:
    """Código HTTP correspondente a um erro da Core."""
    for classe, codigo in STATUS_POR_ERRO:
        if isinstance(erro, classe):
            return codigo
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def corpo_do_erro(erro: BaseErroCore) -> dict:
    corpo = {'success': False, 'message': erro.message}
    if isinstance(erro, DadosInvalidosError):
        corpo['errors'] = erro.erros
    return corpo


def tratar_excecao(exc, context):
    """EXCEPTION_HANDLER do DRF: erros da Core viram respostas JSON."""
    if isinstance(exc, BaseErroCore):
        codigo = status_para_erro(exc)
        if codigo >= 500:
            logger.error("Erro interno em %s: %s", context.get('view'), exc.message)
        return Response(corpo_do_erro(exc), status=codigo)

    return exception_handler(exc, context)
