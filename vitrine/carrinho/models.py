# Define os modelos para o domínio de Carrinho.

import uuid

from django.db import models
from django.db.models import Sum, F
from django.core.exceptions import ValidationError

from vitrine.catalog.models import VarianteProduto


class Carrinho(models.Model):
    """Modelo de Carrinho de Compras. Cada usuário possui no máximo um carrinho."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    usuario = models.OneToOneField(
        'infrastructure.Usuario',
        on_delete=models.CASCADE,
        related_name='carrinho',
    )
    endereco_entrega = models.ForeignKey(
        'infrastructure.EnderecoEntrega',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='carrinhos',
    )
    data_criacao = models.DateTimeField(auto_now_add=True)
    data_atualizacao = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Carrinho"
        verbose_name_plural = "Carrinhos"
        db_table = 'carrinho_compras'

    def __str__(self):
        return f"Carrinho #{self.pk} ({self.usuario})"

    @property
    def total_em_centavos(self) -> int:
        """Calcula o total do carrinho somando os subtotais dos itens."""
        total = self.itens.aggregate(
            total=Sum(F('quantidade') * F('variante__preco_em_centavos'))
        )['total']
        return total or 0


class ItemCarrinho(models.Model):
    """Modelo para os itens dentro do carrinho."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    carrinho = models.ForeignKey(Carrinho, on_delete=models.CASCADE, related_name='itens')
    variante = models.ForeignKey(VarianteProduto, on_delete=models.CASCADE, related_name='itens_carrinho')
    quantidade = models.PositiveIntegerField(default=1)
    data_criacao = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Item do Carrinho"
        verbose_name_plural = "Itens do Carrinho"
        unique_together = ('carrinho', 'variante')  # Evita duplicatas
        ordering = ['data_criacao']
        db_table = 'carrinho_item'

    def __str__(self):
        return f"{self.quantidade}x {self.variante}"

    def clean(self):
        if self.quantidade < 1:
            raise ValidationError("A quantidade deve ser maior que zero.")

    def save(self, *args, **kwargs):
        self.clean()
        super().save(*args, **kwargs)
