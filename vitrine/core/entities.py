from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional
import uuid

# ====================================================================
# ENTIDADES CORE
# Representam os objetos de negócio puros.
# ====================================================================

PAIS_PADRAO = "Brasil"


def formatar_centavos_brl(centavos: int) -> str:
    """Formata um valor em centavos como moeda brasileira (Ex: R$ 1.234,56)."""
    valor = f"{centavos / 100:,.2f}"
    return "R$ " + valor.replace(",", "X").replace(".", ",").replace("X", ".")


@dataclass
class Usuario:
    """Entidade do Usuário, usada como dona de carrinhos e endereços."""
    id: str
    email: str = ""
    nome: str = ""


@dataclass(frozen=True)
class Sessao:
    """Identidade autenticada resolvida pelo provedor de sessão."""
    usuario: Usuario


@dataclass
class Categoria:
    nome: str
    slug: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class Produto:
    """Entidade do Produto do catálogo (somente leitura para o carrinho)."""
    nome: str
    slug: str
    descricao: str = ""
    categoria: Optional[Categoria] = None
    variantes: List["VarianteProduto"] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class VarianteProduto:
    """Variação vendável de um produto (cor/modelo), com preço em centavos."""
    produto_id: str
    nome: str
    slug: str
    preco_em_centavos: int
    imagem_url: str = ""
    cor: str = ""
    produto: Optional[Produto] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def preco_formatado(self) -> str:
        return formatar_centavos_brl(self.preco_em_centavos)


@dataclass
class EnderecoEntrega:
    """Entidade do Endereço de Entrega, sempre pertencente a um único usuário."""
    usuario_id: str
    nome_destinatario: str
    rua: str
    numero: str
    bairro: str
    cidade: str
    estado: str
    cep: str
    telefone: str
    email: str
    cpf_ou_cnpj: str
    complemento: Optional[str] = None
    pais: str = PAIS_PADRAO
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    data_criacao: Optional[datetime] = None


@dataclass
class EnderecoExibicao:
    """
    Projeção de um endereço para os formulários e listas da loja.
    O nome do destinatário volta a ser separado em nome e sobrenome.
    """
    id: str
    primeiro_nome: str
    sobrenome: str
    cpf_cnpj: str
    telefone: str
    cep: str
    endereco: str
    numero: str
    complemento: str
    bairro: str
    cidade: str
    estado: str
    email: str

    @classmethod
    def de_endereco(cls, endereco: EnderecoEntrega) -> "EnderecoExibicao":
        partes = endereco.nome_destinatario.split(maxsplit=1)
        return cls(
            id=endereco.id,
            primeiro_nome=partes[0] if partes else "",
            sobrenome=partes[1] if len(partes) > 1 else "",
            cpf_cnpj=endereco.cpf_ou_cnpj,
            telefone=endereco.telefone,
            cep=endereco.cep,
            endereco=endereco.rua,
            numero=endereco.numero,
            complemento=endereco.complemento or "",
            bairro=endereco.bairro,
            cidade=endereco.cidade,
            estado=endereco.estado,
            email=endereco.email,
        )

    @property
    def resumo(self) -> str:
        """Linha única exibida na seleção de endereços."""
        complemento = f", {self.complemento}" if self.complemento else ""
        return (
            f"{self.primeiro_nome} {self.sobrenome} - {self.endereco}, {self.numero}{complemento}"
            f" - {self.bairro}, {self.cidade} - {self.estado} - CEP: {self.cep}"
        )


@dataclass
class ItemCarrinho:
    """Entidade que representa um item (variante + quantidade) no carrinho."""
    carrinho_id: str
    variante_id: str
    quantidade: int
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    variante: Optional[VarianteProduto] = None
    carrinho: Optional["Carrinho"] = None

    @property
    def subtotal_em_centavos(self) -> int:
        if not self.variante:
            return 0
        return self.variante.preco_em_centavos * self.quantidade


@dataclass
class Carrinho:
    """Entidade do Carrinho de Compras."""
    usuario_id: str
    endereco_entrega_id: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    itens: List[ItemCarrinho] = field(default_factory=list)

    @property
    def total_em_centavos(self) -> int:
        return sum(item.subtotal_em_centavos for item in self.itens)

    @property
    def total_formatado(self) -> str:
        return formatar_centavos_brl(self.total_em_centavos)

    @property
    def quantidade_total(self) -> int:
        return sum(item.quantidade for item in self.itens)


@dataclass
class Resultado:
    """Resultado etiquetado das consultas: sucesso com dados ou falha com mensagem."""
    sucesso: bool
    dados: Any = None
    erro: Optional[str] = None

    @classmethod
    def ok(cls, dados: Any) -> "Resultado":
        return cls(sucesso=True, dados=dados)

    @classmethod
    def falha(cls, erro: str) -> "Resultado":
        return cls(sucesso=False, erro=erro)
