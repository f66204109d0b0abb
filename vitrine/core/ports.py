# vitrine/core/ports.py
"""
Definição das Portas (Interfaces/Protocolos) da Arquitetura Limpa.

Estes protocolos definem o contrato que a camada de Infraestrutura (Repositórios,
Provedor de Sessão) DEVE seguir para se conectar à camada Core (Casos de Uso).
"""

from typing import Any, List, Optional, Protocol
from abc import abstractmethod

from vitrine.core.entities import (
    Carrinho, EnderecoEntrega, ItemCarrinho, Produto, Sessao, VarianteProduto
)


# ====================================================================
# 1. SESSÃO (Porta de Autenticação)
# ====================================================================

class IProvedorSessao(Protocol):
    """Resolve a identidade autenticada a partir dos cabeçalhos da requisição."""

    @abstractmethod
    def obter_sessao(self, requisicao: Any) -> Optional[Sessao]: ...


# ====================================================================
# 2. REPOSITÓRIOS (Portas de Persistência)
# ====================================================================

class IEnderecoEntregaRepository(Protocol):
    """Protocolo para a persistência de Endereços de Entrega."""

    @abstractmethod
    def criar(self, endereco: EnderecoEntrega) -> EnderecoEntrega: ...

    @abstractmethod
    def buscar_por_id(self, endereco_id: str) -> Optional[EnderecoEntrega]: ...

    @abstractmethod
    def listar_por_usuario(self, usuario_id: str) -> List[EnderecoEntrega]:
        """Retorna os endereços do usuário em ordem crescente de criação."""
        ...


class ICarrinhoRepository(Protocol):
    """Protocolo para a persistência de Carrinhos e Itens de Carrinho."""

    @abstractmethod
    def buscar_por_usuario(self, usuario_id: str) -> Optional[Carrinho]: ...

    @abstractmethod
    def buscar_ou_criar(self, usuario_id: str) -> Carrinho: ...

    @abstractmethod
    def buscar_item(self, item_id: str) -> Optional[ItemCarrinho]:
        """Busca o item já com o carrinho pai carregado (item.carrinho)."""
        ...

    @abstractmethod
    def adicionar_item(self, carrinho_id: str, variante_id: str, quantidade: int) -> ItemCarrinho: ...

    @abstractmethod
    def remover_item(self, item_id: str, usuario_id: str) -> None:
        """Remove o item; levanta ItemCarrinhoNaoEncontradoError se nada foi removido."""
        ...

    @abstractmethod
    def diminuir_quantidade(self, item_id: str, usuario_id: str) -> int:
        """
        Diminui a quantidade em uma unidade de forma atômica.
        Retorna a nova quantidade; 0 indica que o item foi removido.
        """
        ...

    @abstractmethod
    def definir_endereco_entrega(self, carrinho_id: str, endereco_id: str) -> Carrinho: ...


class ICatalogoRepository(Protocol):
    """Protocolo de leitura do catálogo de produtos."""

    @abstractmethod
    def listar_produtos(self) -> List[Produto]: ...

    @abstractmethod
    def buscar_variante_por_id(self, variante_id: str) -> Optional[VarianteProduto]: ...

    @abstractmethod
    def buscar_variante_por_slug(self, slug: str) -> Optional[VarianteProduto]: ...

    @abstractmethod
    def listar_variantes_do_produto(self, produto_id: str) -> List[VarianteProduto]: ...
