"""
Mapeadores (Mappers) para converter entre:
1. Modelos do Django ORM
2. Entidades de Domínio (vitrine.core.entities)
"""
from typing import Any, Optional, Type
from django.db import models
from django.apps import apps

# Importa as entidades do Core
from vitrine.core.entities import (
    Usuario as UsuarioEntity,
    EnderecoEntrega as EnderecoEntregaEntity,
    Categoria as CategoriaEntity,
    Produto as ProdutoEntity,
    VarianteProduto as VarianteProdutoEntity,
    Carrinho as CarrinhoEntity,
    ItemCarrinho as ItemCarrinhoEntity,
)


# ====================================================================
# Uso de apps.get_model para evitar dependências circulares
# ====================================================================

def get_model(app_label: str, model_name: str):
    """Retorna um modelo do Django de forma segura (lazy loading)."""
    return apps.get_model(app_label, model_name)


def _id(valor: Any) -> Optional[str]:
    return str(valor) if valor is not None else None


# ====================================================================
# MAPPERS DE USUÁRIO E ENDEREÇO
# ====================================================================

class UsuarioMapper:
    """Mapeador para o Usuário."""

    @staticmethod
    def to_entity(model: Any) -> Optional[UsuarioEntity]:
        """Converte Usuario Model para Usuario Entity."""
        if not model: return None
        return UsuarioEntity(
            id=str(model.pk),
            email=model.email,
            nome=model.get_full_name(),
        )


class EnderecoEntregaMapper:
    """Mapeador para Endereço de Entrega."""

    @classmethod
    def model_class(cls) -> Type[models.Model]:
        return get_model('infrastructure', 'EnderecoEntrega')

    @staticmethod
    def to_entity(model: Any) -> Optional[EnderecoEntregaEntity]:
        """Converte EnderecoEntrega Model para EnderecoEntrega Entity."""
        if not model: return None
        return EnderecoEntregaEntity(
            id=str(model.id),
            usuario_id=str(model.usuario_id),
            nome_destinatario=model.nome_destinatario,
            rua=model.rua,
            numero=model.numero,
            complemento=model.complemento,
            bairro=model.bairro,
            cidade=model.cidade,
            estado=model.estado,
            cep=model.cep,
            pais=model.pais,
            telefone=model.telefone,
            email=model.email,
            cpf_ou_cnpj=model.cpf_ou_cnpj,
            data_criacao=model.data_criacao,
        )

    @classmethod
    def to_model(cls, entity: EnderecoEntregaEntity) -> Any:
        """Converte EnderecoEntrega Entity para um novo EnderecoEntrega Model."""
        return cls.model_class()(
            id=entity.id,
            usuario_id=entity.usuario_id,
            nome_destinatario=entity.nome_destinatario,
            rua=entity.rua,
            numero=entity.numero,
            complemento=entity.complemento,
            bairro=entity.bairro,
            cidade=entity.cidade,
            estado=entity.estado,
            cep=entity.cep,
            pais=entity.pais,
            telefone=entity.telefone,
            email=entity.email,
            cpf_ou_cnpj=entity.cpf_ou_cnpj,
        )


# ====================================================================
# MAPPERS DO CATÁLOGO
# ====================================================================

class CategoriaMapper:
    """Mapeador para Categoria."""

    @staticmethod
    def to_entity(model: Any) -> Optional[CategoriaEntity]:
        if not model: return None
        return CategoriaEntity(id=str(model.id), nome=model.nome, slug=model.slug)


class ProdutoMapper:
    """Mapeador para Produto."""

    @staticmethod
    def to_entity(model: Any, com_variantes: bool = False) -> Optional[ProdutoEntity]:
        """
        Converte Produto Model para Produto Entity.
        Com `com_variantes`, as variantes pré-carregadas também são convertidas.
        """
        if not model: return None
        produto = ProdutoEntity(
            id=str(model.id),
            nome=model.nome,
            slug=model.slug,
            descricao=model.descricao,
            categoria=CategoriaMapper.to_entity(model.categoria),
        )
        if com_variantes:
            produto.variantes = [
                VarianteProdutoMapper.to_entity(variante, produto=produto)
                for variante in model.variantes.all()
            ]
        return produto


class VarianteProdutoMapper:
    """Mapeador para Variante de Produto."""

    @staticmethod
    def to_entity(model: Any, produto: Optional[ProdutoEntity] = None) -> Optional[VarianteProdutoEntity]:
        if not model: return None
        if produto is None:
            produto = ProdutoMapper.to_entity(model.produto)
        return VarianteProdutoEntity(
            id=str(model.id),
            produto_id=str(model.produto_id),
            nome=model.nome,
            slug=model.slug,
            preco_em_centavos=model.preco_em_centavos,
            imagem_url=model.imagem_url,
            cor=model.cor,
            produto=produto,
        )


# ====================================================================
# MAPPERS DO CARRINHO
# ====================================================================

class ItemCarrinhoMapper:
    """Mapeador para ItemCarrinho."""

    @staticmethod
    def to_entity(model: Any, carrinho: Optional[CarrinhoEntity] = None) -> Optional[ItemCarrinhoEntity]:
        """Converte ItemCarrinho Model para ItemCarrinho Entity (com a variante carregada)."""
        if not model: return None
        return ItemCarrinhoEntity(
            id=str(model.id),
            carrinho_id=str(model.carrinho_id),
            variante_id=str(model.variante_id),
            quantidade=model.quantidade,
            variante=VarianteProdutoMapper.to_entity(model.variante),
            carrinho=carrinho,
        )


class CarrinhoMapper:
    """Mapeador para Carrinho."""

    @staticmethod
    def to_entity(model: Any, com_itens: bool = True) -> Optional[CarrinhoEntity]:
        """Converte Carrinho Model para Carrinho Entity, incluindo itens."""
        if not model: return None
        carrinho = CarrinhoEntity(
            id=str(model.id),
            usuario_id=str(model.usuario_id),
            endereco_entrega_id=_id(model.endereco_entrega_id),
        )
        if com_itens:
            carrinho.itens = [ItemCarrinhoMapper.to_entity(item) for item in model.itens.all()]
        return carrinho
