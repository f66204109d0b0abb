"""
Camada de Infraestrutura: Implementação dos Repositórios.

Esta camada traduz as operações abstratas definidas nas Portas da Core
em chamadas concretas ao Django ORM. Falhas do banco de dados são convertidas
em ErroPersistencia para que a Core nunca dependa de exceções do framework.
"""
import functools
import logging
from typing import List, Optional

from django.apps import apps
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction
from django.db.models import F, Prefetch

# Importações da Camada CORE (ENTIDADES e PORTAS)
from vitrine.core.entities import (
    Carrinho, EnderecoEntrega, ItemCarrinho, Produto, VarianteProduto
)
from vitrine.core.exceptions import (
    CarrinhoNaoEncontradoError,
    ErroPersistencia,
    ItemCarrinhoNaoEncontradoError,
)
from vitrine.core.ports import ICarrinhoRepository, ICatalogoRepository, IEnderecoEntregaRepository

from .mappers import (
    CarrinhoMapper, EnderecoEntregaMapper, ItemCarrinhoMapper, ProdutoMapper, VarianteProdutoMapper
)

logger = logging.getLogger(__name__)


# Helper para Lazy Loading
def get_model(app_label, model_name):
    """Busca o modelo Django de forma segura (Lazy Loading)."""
    return apps.get_model(app_label, model_name)


def traduzir_erros_banco(metodo):
    """Converte falhas do banco (DatabaseError) em ErroPersistencia."""
    @functools.wraps(metodo)
    def wrapper(*args, **kwargs):
        try:
            return metodo(*args, **kwargs)
        except DatabaseError as e:
            logger.error("Falha de banco em %s: %s", metodo.__qualname__, e)
            raise ErroPersistencia() from e
    return wrapper


# ====================================================================
# 1. ENDEREÇOS DE ENTREGA
# ====================================================================

class EnderecoEntregaRepositoryDjango(IEnderecoEntregaRepository):
    """Implementação do EnderecoEntregaRepository usando o Django ORM."""

    @property
    def EnderecoModel(self):
        return get_model('infrastructure', 'EnderecoEntrega')

    @traduzir_erros_banco
    def criar(self, endereco: EnderecoEntrega) -> EnderecoEntrega:
        model = EnderecoEntregaMapper.to_model(endereco)
        model.save(force_insert=True)
        return EnderecoEntregaMapper.to_entity(model)

    @traduzir_erros_banco
    def buscar_por_id(self, endereco_id: str) -> Optional[EnderecoEntrega]:
        try:
            model = self.EnderecoModel.objects.get(pk=endereco_id)
        except (self.EnderecoModel.DoesNotExist, ValidationError):
            return None
        return EnderecoEntregaMapper.to_entity(model)

    @traduzir_erros_banco
    def listar_por_usuario(self, usuario_id: str) -> List[EnderecoEntrega]:
        qs = self.EnderecoModel.objects.filter(usuario_id=usuario_id).order_by('data_criacao')
        return [EnderecoEntregaMapper.to_entity(model) for model in qs]


# ====================================================================
# 2. CARRINHO
# ====================================================================

class CarrinhoRepositoryDjango(ICarrinhoRepository):
    """Implementação do CarrinhoRepository usando o Django ORM."""

    # Propriedades para carregar modelos de forma LAZY
    @property
    def CarrinhoModel(self):
        return get_model('carrinho', 'Carrinho')

    @property
    def ItemCarrinhoModel(self):
        return get_model('carrinho', 'ItemCarrinho')

    def _carrinhos_com_itens(self):
        return self.CarrinhoModel.objects.prefetch_related(
            Prefetch(
                'itens',
                queryset=self.ItemCarrinhoModel.objects.select_related(
                    'variante__produto__categoria'
                ),
            )
        )

    @traduzir_erros_banco
    def buscar_por_usuario(self, usuario_id: str) -> Optional[Carrinho]:
        try:
            model = self._carrinhos_com_itens().get(usuario_id=usuario_id)
        except self.CarrinhoModel.DoesNotExist:
            return None
        return CarrinhoMapper.to_entity(model)

    @traduzir_erros_banco
    def buscar_ou_criar(self, usuario_id: str) -> Carrinho:
        """Busca um carrinho existente ou cria um novo se não existir."""
        model, criado = self.CarrinhoModel.objects.get_or_create(usuario_id=usuario_id)
        if criado:
            logger.info("Carrinho %s criado para o usuário %s.", model.pk, usuario_id)
            return CarrinhoMapper.to_entity(model, com_itens=False)
        return self.buscar_por_usuario(usuario_id)

    @traduzir_erros_banco
    def buscar_item(self, item_id: str) -> Optional[ItemCarrinho]:
        try:
            model = self.ItemCarrinhoModel.objects.select_related(
                'carrinho', 'variante__produto__categoria'
            ).get(pk=item_id)
        except (self.ItemCarrinhoModel.DoesNotExist, ValidationError):
            return None
        carrinho = CarrinhoMapper.to_entity(model.carrinho, com_itens=False)
        return ItemCarrinhoMapper.to_entity(model, carrinho=carrinho)

    @traduzir_erros_banco
    @transaction.atomic
    def adicionar_item(self, carrinho_id: str, variante_id: str, quantidade: int) -> ItemCarrinho:
        """Cria o item ou incrementa a quantidade da mesma variante já presente."""
        model, criado = self.ItemCarrinhoModel.objects.get_or_create(
            carrinho_id=carrinho_id,
            variante_id=variante_id,
            defaults={'quantidade': quantidade},
        )
        if not criado:
            self.ItemCarrinhoModel.objects.filter(pk=model.pk).update(
                quantidade=F('quantidade') + quantidade
            )
        model = self.ItemCarrinhoModel.objects.select_related(
            'variante__produto__categoria'
        ).get(pk=model.pk)
        return ItemCarrinhoMapper.to_entity(model)

    @traduzir_erros_banco
    def remover_item(self, item_id: str, usuario_id: str) -> None:
        removidos, _ = self.ItemCarrinhoModel.objects.filter(
            pk=item_id, carrinho__usuario_id=usuario_id
        ).delete()
        if not removidos:
            raise ItemCarrinhoNaoEncontradoError()

    @traduzir_erros_banco
    @transaction.atomic
    def diminuir_quantidade(self, item_id: str, usuario_id: str) -> int:
        """
        Decremento condicional: acima de 1 subtrai uma unidade, senão remove a linha.
        Cada ramo é uma única instrução filtrada pela quantidade atual.
        """
        itens = self.ItemCarrinhoModel.objects.filter(pk=item_id, carrinho__usuario_id=usuario_id)

        if itens.filter(quantidade__gt=1).update(quantidade=F('quantidade') - 1):
            return itens.values_list('quantidade', flat=True).get()

        removidos, _ = itens.filter(quantidade__lte=1).delete()
        if removidos:
            return 0

        raise ItemCarrinhoNaoEncontradoError()

    @traduzir_erros_banco
    def definir_endereco_entrega(self, carrinho_id: str, endereco_id: str) -> Carrinho:
        atualizados = self.CarrinhoModel.objects.filter(pk=carrinho_id).update(
            endereco_entrega_id=endereco_id
        )
        if not atualizados:
            raise CarrinhoNaoEncontradoError()
        return CarrinhoMapper.to_entity(self._carrinhos_com_itens().get(pk=carrinho_id))


# ====================================================================
# 3. CATÁLOGO
# ====================================================================

class CatalogoRepositoryDjango(ICatalogoRepository):
    """Leitura do catálogo (produtos e variantes) via Django ORM."""

    @property
    def ProdutoModel(self):
        return get_model('catalog', 'Produto')

    @property
    def VarianteModel(self):
        return get_model('catalog', 'VarianteProduto')

    @traduzir_erros_banco
    def listar_produtos(self) -> List[Produto]:
        qs = self.ProdutoModel.objects.select_related('categoria').prefetch_related('variantes')
        return [ProdutoMapper.to_entity(model, com_variantes=True) for model in qs]

    @traduzir_erros_banco
    def buscar_variante_por_id(self, variante_id: str) -> Optional[VarianteProduto]:
        try:
            model = self.VarianteModel.objects.select_related('produto__categoria').get(pk=variante_id)
        except (self.VarianteModel.DoesNotExist, ValidationError):
            return None
        return VarianteProdutoMapper.to_entity(model)

    @traduzir_erros_banco
    def buscar_variante_por_slug(self, slug: str) -> Optional[VarianteProduto]:
        try:
            model = self.VarianteModel.objects.select_related('produto__categoria').get(slug=slug)
        except self.VarianteModel.DoesNotExist:
            return None
        return VarianteProdutoMapper.to_entity(model)

    @traduzir_erros_banco
    def listar_variantes_do_produto(self, produto_id: str) -> List[VarianteProduto]:
        qs = self.VarianteModel.objects.filter(produto_id=produto_id).select_related('produto__categoria')
        return [VarianteProdutoMapper.to_entity(model) for model in qs]
