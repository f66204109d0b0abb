"""
Provedor de Sessão: resolve a identidade autenticada de uma requisição.

Aceita tanto a sessão do Django (páginas HTML) quanto o cabeçalho
`Authorization: Bearer <token>` emitido pelo simplejwt (API).
"""
import logging
from typing import Any, Optional

from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken, TokenError

from vitrine.core.entities import Sessao
from vitrine.core.ports import IProvedorSessao

from .mappers import UsuarioMapper

logger = logging.getLogger(__name__)


class ProvedorSessaoDjango(IProvedorSessao):
    """Implementação do IProvedorSessao sobre o Django e o simplejwt."""

    def __init__(self):
        self.autenticacao_jwt = JWTAuthentication()

    def obter_sessao(self, requisicao: Any) -> Optional[Sessao]:
        try:
            # Em requisições do DRF, acessar `user` já executa os autenticadores.
            usuario = getattr(requisicao, 'user', None)
            if usuario is not None and usuario.is_authenticated:
                return Sessao(usuario=UsuarioMapper.to_entity(usuario))

            autenticado = self.autenticacao_jwt.authenticate(requisicao)
        except (InvalidToken, TokenError, AuthenticationFailed) as e:
            logger.info("Token de acesso rejeitado: %s", e)
            return None

        if autenticado is None:
            return None

        usuario, _token = autenticado
        return Sessao(usuario=UsuarioMapper.to_entity(usuario))
