# vitrine/core/use_cases.py
"""
Implementação dos Casos de Uso (Lógica de Negócio) da aplicação.
Esta camada depende apenas das Entidades, Esquemas e Portas (Interfaces) do Core,
garantindo o isolamento da lógica de negócio.

Toda ação de escrita segue a mesma ordem: autenticar, validar a entrada,
verificar a posse do recurso e só então alterar o repositório.
"""
import logging
from typing import Any, List, Mapping, Optional

from vitrine.core.entities import (
    PAIS_PADRAO, Carrinho, EnderecoEntrega, EnderecoExibicao, ItemCarrinho, Produto,
    Resultado, Sessao, VarianteProduto
)
from vitrine.core.exceptions import (
    AcessoNegadoError,
    EnderecoNaoEncontradoError,
    ItemCarrinhoNaoEncontradoError,
    NaoAutenticadoError,
    VarianteNaoEncontradaError,
)
from vitrine.core.ports import ICarrinhoRepository, ICatalogoRepository, IEnderecoEntregaRepository
from vitrine.core.schemas import (
    AdicionarProdutoSchema,
    AtualizarEnderecoCarrinhoSchema,
    CriarEnderecoEntregaSchema,
    ItemCarrinhoSchema,
    validar,
)

logger = logging.getLogger(__name__)


def exigir_sessao(sessao: Optional[Sessao]) -> Sessao:
    """Falha fechada: sem usuário autenticado nenhuma ação prossegue."""
    if sessao is None or sessao.usuario is None or not sessao.usuario.id:
        raise NaoAutenticadoError()
    return sessao


def _buscar_item_do_usuario(carrinho_repo: ICarrinhoRepository, sessao: Sessao, item_id: str) -> ItemCarrinho:
    item = carrinho_repo.buscar_item(item_id)
    if not item:
        raise ItemCarrinhoNaoEncontradoError()

    if item.carrinho is None or str(item.carrinho.usuario_id) != str(sessao.usuario.id):
        logger.warning(
            "Usuário %s tentou alterar o item %s de outro carrinho.", sessao.usuario.id, item_id
        )
        raise AcessoNegadoError("Usuário sem permissão para alterar este item.")
    return item


# ====================================================================
# 1. CASOS DE USO DE ENDEREÇO DE ENTREGA
# ====================================================================

class CriarEnderecoEntregaUseCase:
    """Cadastra um endereço de entrega pertencente ao usuário autenticado."""
    def __init__(self, endereco_repo: IEnderecoEntregaRepository):
        self.endereco_repo = endereco_repo

    def executar(self, sessao: Optional[Sessao], dados: Mapping[str, Any]) -> EnderecoEntrega:
        sessao = exigir_sessao(sessao)
        campos = validar(CriarEnderecoEntregaSchema, dados)

        endereco = EnderecoEntrega(
            usuario_id=sessao.usuario.id,
            nome_destinatario=f"{campos['primeiro_nome']} {campos['sobrenome']}",
            rua=campos["endereco"],
            numero=campos["numero"],
            complemento=campos.get("complemento") or None,
            bairro=campos["bairro"],
            cidade=campos["cidade"],
            estado=campos["estado"],
            cep=campos["cep"],
            pais=PAIS_PADRAO,
            telefone=campos["telefone"],
            email=campos["email"],
            cpf_ou_cnpj=campos["cpf_cnpj"],
        )
        criado = self.endereco_repo.criar(endereco)
        logger.info("Endereço %s criado para o usuário %s.", criado.id, sessao.usuario.id)
        return criado


class ListarEnderecosEntregaUseCase:
    """
    Lista os endereços do usuário já projetados para exibição.

    Falhas de leitura nunca são propagadas: o chamador sempre recebe um
    Resultado, de sucesso com os dados ou de falha com a mensagem.
    """
    MENSAGEM_FALHA = "Erro ao buscar endereços"

    def __init__(self, endereco_repo: IEnderecoEntregaRepository):
        self.endereco_repo = endereco_repo

    def executar(self, sessao: Optional[Sessao]) -> Resultado:
        try:
            sessao = exigir_sessao(sessao)
            enderecos = self.endereco_repo.listar_por_usuario(sessao.usuario.id)
        except NaoAutenticadoError as e:
            return Resultado.falha(e.message)
        except Exception:
            logger.exception("Erro ao buscar endereços.")
            return Resultado.falha(self.MENSAGEM_FALHA)

        return Resultado.ok([EnderecoExibicao.de_endereco(endereco) for endereco in enderecos])


# ====================================================================
# 2. CASOS DE USO DO CARRINHO
# ====================================================================

class ObterCarrinhoUseCase:
    """Retorna o carrinho do usuário; sem carrinho, devolve um carrinho vazio."""
    def __init__(self, carrinho_repo: ICarrinhoRepository):
        self.carrinho_repo = carrinho_repo

    def executar(self, sessao: Optional[Sessao]) -> Carrinho:
        sessao = exigir_sessao(sessao)
        carrinho = self.carrinho_repo.buscar_por_usuario(sessao.usuario.id)
        return carrinho or Carrinho(usuario_id=sessao.usuario.id)


class AdicionarProdutoAoCarrinhoUseCase:
    """Adiciona uma variante ao carrinho ou incrementa a quantidade existente."""
    def __init__(self, carrinho_repo: ICarrinhoRepository, catalogo_repo: ICatalogoRepository):
        self.carrinho_repo = carrinho_repo
        self.catalogo_repo = catalogo_repo

    def executar(self, sessao: Optional[Sessao], dados: Mapping[str, Any]) -> ItemCarrinho:
        sessao = exigir_sessao(sessao)
        campos = validar(AdicionarProdutoSchema, dados)
        variante_id = str(campos["variante_id"])

        if not self.catalogo_repo.buscar_variante_por_id(variante_id):
            raise VarianteNaoEncontradaError(f"Variante {variante_id} não encontrada.")

        carrinho = self.carrinho_repo.buscar_ou_criar(sessao.usuario.id)
        item = self.carrinho_repo.adicionar_item(carrinho.id, variante_id, campos["quantidade"])
        logger.info("Variante %s adicionada ao carrinho %s.", variante_id, carrinho.id)
        return item


class RemoverItemCarrinhoUseCase:
    """Remove um item do carrinho do usuário autenticado."""
    def __init__(self, carrinho_repo: ICarrinhoRepository):
        self.carrinho_repo = carrinho_repo

    def executar(self, sessao: Optional[Sessao], dados: Mapping[str, Any]) -> None:
        sessao = exigir_sessao(sessao)
        item_id = str(validar(ItemCarrinhoSchema, dados)["item_carrinho_id"])

        _buscar_item_do_usuario(self.carrinho_repo, sessao, item_id)
        self.carrinho_repo.remover_item(item_id, sessao.usuario.id)
        logger.info("Item %s removido do carrinho.", item_id)


class DiminuirQuantidadeItemCarrinhoUseCase:
    """
    Diminui em uma unidade a quantidade de um item.

    Quantidade 1 remove o item; acima disso, decrementa. A decisão é feita pelo
    repositório em uma única operação condicional, para que duas chamadas
    simultâneas não deixem um item com quantidade zero.
    """
    def __init__(self, carrinho_repo: ICarrinhoRepository):
        self.carrinho_repo = carrinho_repo

    def executar(self, sessao: Optional[Sessao], dados: Mapping[str, Any]) -> int:
        sessao = exigir_sessao(sessao)
        item_id = str(validar(ItemCarrinhoSchema, dados)["item_carrinho_id"])

        _buscar_item_do_usuario(self.carrinho_repo, sessao, item_id)
        nova_quantidade = self.carrinho_repo.diminuir_quantidade(item_id, sessao.usuario.id)
        if nova_quantidade == 0:
            logger.info("Item %s removido ao chegar a quantidade zero.", item_id)
        return nova_quantidade


class AtualizarEnderecoEntregaCarrinhoUseCase:
    """Vincula um endereço de entrega do próprio usuário ao carrinho dele."""
    def __init__(self, carrinho_repo: ICarrinhoRepository, endereco_repo: IEnderecoEntregaRepository):
        self.carrinho_repo = carrinho_repo
        self.endereco_repo = endereco_repo

    def executar(self, sessao: Optional[Sessao], dados: Mapping[str, Any]) -> Carrinho:
        sessao = exigir_sessao(sessao)
        endereco_id = str(validar(AtualizarEnderecoCarrinhoSchema, dados)["endereco_entrega_id"])

        endereco = self.endereco_repo.buscar_por_id(endereco_id)
        if not endereco:
            raise EnderecoNaoEncontradoError()
        if str(endereco.usuario_id) != str(sessao.usuario.id):
            logger.warning(
                "Usuário %s tentou usar o endereço %s de outro usuário.", sessao.usuario.id, endereco_id
            )
            raise AcessoNegadoError("Usuário sem permissão para usar este endereço.")

        carrinho = self.carrinho_repo.buscar_ou_criar(sessao.usuario.id)
        return self.carrinho_repo.definir_endereco_entrega(carrinho.id, endereco_id)


# ====================================================================
# 3. CASOS DE USO DO CATÁLOGO
# ====================================================================

class ListarProdutosUseCase:
    def __init__(self, catalogo_repo: ICatalogoRepository):
        self.catalogo_repo = catalogo_repo

    def executar(self) -> List[Produto]:
        return self.catalogo_repo.listar_produtos()


class DetalharVarianteUseCase:
    """Busca uma variante pelo slug junto das demais variantes do mesmo produto."""
    def __init__(self, catalogo_repo: ICatalogoRepository):
        self.catalogo_repo = catalogo_repo

    def executar(self, slug: str) -> VarianteProduto:
        variante = self.catalogo_repo.buscar_variante_por_slug(slug)
        if not variante:
            raise VarianteNaoEncontradaError(f"Variante '{slug}' não encontrada.")
        return variante

    def listar_variantes(self, variante: VarianteProduto) -> List[VarianteProduto]:
        return self.catalogo_repo.listar_variantes_do_produto(variante.produto_id)
