# vitrine/core/dependency_injection.py
"""
Módulo de Injeção de Dependência (DI).
Responsável por instanciar os Use Cases com suas dependências de Repositórios
concretos da camada de Infraestrutura.
"""
from vitrine.infrastructure.repositories import (
    CarrinhoRepositoryDjango,
    CatalogoRepositoryDjango,
    EnderecoEntregaRepositoryDjango,
)
from vitrine.infrastructure.sessao import ProvedorSessaoDjango
from .use_cases import (
    AdicionarProdutoAoCarrinhoUseCase,
    AtualizarEnderecoEntregaCarrinhoUseCase,
    CriarEnderecoEntregaUseCase,
    DetalharVarianteUseCase,
    DiminuirQuantidadeItemCarrinhoUseCase,
    ListarEnderecosEntregaUseCase,
    ListarProdutosUseCase,
    ObterCarrinhoUseCase,
    RemoverItemCarrinhoUseCase,
)

# Repositórios e Provedor de Sessão Concretos
endereco_repo = EnderecoEntregaRepositoryDjango()
carrinho_repo = CarrinhoRepositoryDjango()
catalogo_repo = CatalogoRepositoryDjango()
provedor_sessao = ProvedorSessaoDjango()


def get_provedor_sessao() -> ProvedorSessaoDjango:
    return provedor_sessao


# ====================================================================
# Use Cases de Endereço de Entrega
# ====================================================================

def get_criar_endereco_entrega_use_case() -> CriarEnderecoEntregaUseCase:
    return CriarEnderecoEntregaUseCase(endereco_repo)

def get_listar_enderecos_entrega_use_case() -> ListarEnderecosEntregaUseCase:
    return ListarEnderecosEntregaUseCase(endereco_repo)


# ====================================================================
# Use Cases de Carrinho
# ====================================================================

def get_obter_carrinho_use_case() -> ObterCarrinhoUseCase:
    return ObterCarrinhoUseCase(carrinho_repo)

def get_adicionar_produto_use_case() -> AdicionarProdutoAoCarrinhoUseCase:
    return AdicionarProdutoAoCarrinhoUseCase(carrinho_repo, catalogo_repo)

def get_remover_item_carrinho_use_case() -> RemoverItemCarrinhoUseCase:
    return RemoverItemCarrinhoUseCase(carrinho_repo)

def get_diminuir_quantidade_use_case() -> DiminuirQuantidadeItemCarrinhoUseCase:
    return DiminuirQuantidadeItemCarrinhoUseCase(carrinho_repo)

def get_atualizar_endereco_carrinho_use_case() -> AtualizarEnderecoEntregaCarrinhoUseCase:
    return AtualizarEnderecoEntregaCarrinhoUseCase(carrinho_repo, endereco_repo)


# ====================================================================
# Use Cases de Catálogo
# ====================================================================

def get_listar_produtos_use_case() -> ListarProdutosUseCase:
    return ListarProdutosUseCase(catalogo_repo)

def get_detalhar_variante_use_case() -> DetalharVarianteUseCase:
    return DetalharVarianteUseCase(catalogo_repo)
