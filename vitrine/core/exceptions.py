from typing import Dict, List, Optional


class BaseErroCore(Exception):
    """Classe base para todas as exceções da Camada Core."""
    def __init__(self, message="Erro na camada de negócio."):
        self.message = message
        super().__init__(self.message)


class NaoAutenticadoError(BaseErroCore):
    """Erro levantado quando não existe sessão autenticada."""
    def __init__(self, message="Usuário não autenticado."):
        super().__init__(message)


class DadosInvalidosError(BaseErroCore):
    """Erro levantado quando dados inválidos são fornecidos."""
    def __init__(self, message="Os dados fornecidos são inválidos.", erros: Optional[Dict[str, List[str]]] = None):
        self.erros = erros or {}
        super().__init__(message)


class AcessoNegadoError(BaseErroCore):
    """Erro levantado quando o recurso não pertence ao usuário autenticado."""
    def __init__(self, message="Usuário sem permissão para alterar este recurso."):
        super().__init__(message)


# ===============================================
# ERROS DE PERSISTÊNCIA E ENTIDADE
# ===============================================

class ItemNaoEncontradoError(BaseErroCore):
    """Erro levantado quando um item (genérico) não é encontrado."""
    def __init__(self, message="O item solicitado não foi encontrado."):
        super().__init__(message)


class ItemCarrinhoNaoEncontradoError(ItemNaoEncontradoError):
    def __init__(self, message="Item não encontrado no carrinho."):
        super().__init__(message)


class CarrinhoNaoEncontradoError(ItemNaoEncontradoError):
    def __init__(self, message="Carrinho não encontrado."):
        super().__init__(message)


class EnderecoNaoEncontradoError(ItemNaoEncontradoError):
    def __init__(self, message="Endereço de entrega não encontrado."):
        super().__init__(message)


class VarianteNaoEncontradaError(ItemNaoEncontradoError):
    def __init__(self, message="Variante de produto não encontrada."):
        super().__init__(message)


class ErroPersistencia(BaseErroCore):
    """Falha do banco de dados subjacente."""
    def __init__(self, message="Falha ao acessar o banco de dados."):
        super().__init__(message)
