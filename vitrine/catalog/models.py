import uuid

from django.db import models
from django.utils.text import slugify

# ====================================================================
# 1. Categoria
# ====================================================================

class Categoria(models.Model):
    """Modelo para agrupar produtos (Ex: Camisetas, Calças, Tênis)."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    nome = models.CharField(max_length=100, unique=True, verbose_name="Nome da Categoria")
    slug = models.SlugField(max_length=100, unique=True, editable=False)
    data_criacao = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Categoria"
        verbose_name_plural = "Categorias"
        db_table = 'catalogo_categoria'
        ordering = ['nome']

    def __str__(self):
        return self.nome

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.nome)
        super().save(*args, **kwargs)

# ====================================================================
# 2. Produto
# ====================================================================

class Produto(models.Model):
    """Modelo para representar um produto no catálogo."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    categoria = models.ForeignKey(Categoria, on_delete=models.CASCADE, related_name='produtos')
    nome = models.CharField(max_length=255, verbose_name="Nome do Produto")
    slug = models.SlugField(max_length=255, unique=True, editable=False)
    descricao = models.TextField(blank=True, verbose_name="Descrição")
    data_criacao = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Produto"
        verbose_name_plural = "Produtos"
        db_table = 'catalogo_produto'
        ordering = ['data_criacao']

    def __str__(self):
        return self.nome

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.nome)
        super().save(*args, **kwargs)

# ====================================================================
# 3. Variante do Produto
# ====================================================================

class VarianteProduto(models.Model):
    """Variação vendável de um produto. O preço é guardado em centavos."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    produto = models.ForeignKey(Produto, on_delete=models.CASCADE, related_name='variantes')
    nome = models.CharField(max_length=255, verbose_name="Nome da Variante")
    slug = models.SlugField(max_length=255, unique=True, editable=False)
    cor = models.CharField(max_length=50, blank=True)
    imagem_url = models.URLField(max_length=500, blank=True, verbose_name="Imagem")
    preco_em_centavos = models.PositiveIntegerField(verbose_name="Preço (centavos)")
    data_criacao = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = "Variante de Produto"
        verbose_name_plural = "Variantes de Produto"
        db_table = 'catalogo_variante_produto'
        ordering = ['data_criacao']

    def __str__(self):
        return f"{self.produto.nome} - {self.nome}"

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(f"{self.produto.nome}-{self.nome}")
        super().save(*args, **kwargs)
