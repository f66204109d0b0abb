# Configuração da interface administrativa do Django para os modelos da Vitrine.

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from vitrine.carrinho.models import Carrinho, ItemCarrinho
from vitrine.catalog.models import Categoria, Produto, VarianteProduto
from vitrine.core.entities import formatar_centavos_brl
from vitrine.infrastructure.models import EnderecoEntrega, Usuario

# ====================================================================
# 1. ADMIN PERSONALIZADO PARA USUÁRIOS
# ====================================================================

@admin.register(Usuario)
class UsuarioAdmin(BaseUserAdmin):
    """Customização do modelo Usuario, que usa email/senha no lugar de username."""

    list_display = ('email', 'first_name', 'last_name', 'is_staff', 'is_active', 'telefone')

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Informações pessoais', {'fields': ('first_name', 'last_name', 'telefone')}),
        ('Permissões', {'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions')}),
        ('Datas importantes', {'fields': ('last_login', 'date_joined')}),
    )
    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('email', 'first_name', 'last_name', 'password1', 'password2'),
        }),
    )

    # O campo 'username' não existe no modelo Usuario: pesquisa e ordenação usam o 'email'.
    search_fields = ('email', 'first_name', 'last_name')
    ordering = ('email',)


@admin.register(EnderecoEntrega)
class EnderecoEntregaAdmin(admin.ModelAdmin):
    list_display = ('nome_destinatario', 'usuario', 'cidade', 'estado', 'cep', 'data_criacao')
    list_filter = ('estado',)
    search_fields = ('nome_destinatario', 'usuario__email', 'cep')
    readonly_fields = ('data_criacao',)


# ====================================================================
# 2. ADMIN DO CATÁLOGO
# ====================================================================

@admin.register(Categoria)
class CategoriaAdmin(admin.ModelAdmin):
    list_display = ('nome', 'slug')
    search_fields = ('nome',)


class VarianteProdutoInline(admin.TabularInline):
    """Permite editar as Variantes diretamente na página do Produto."""
    model = VarianteProduto
    extra = 1
    fields = ('nome', 'cor', 'imagem_url', 'preco_em_centavos')


@admin.register(Produto)
class ProdutoAdmin(admin.ModelAdmin):
    list_display = ('nome', 'categoria', 'slug')
    list_filter = ('categoria',)
    search_fields = ('nome', 'descricao')
    inlines = [VarianteProdutoInline]


# ====================================================================
# 3. ADMIN DO CARRINHO
# ====================================================================

class ItemCarrinhoInline(admin.TabularInline):
    model = ItemCarrinho
    extra = 0
    raw_id_fields = ('variante',)


@admin.register(Carrinho)
class CarrinhoAdmin(admin.ModelAdmin):
    list_display = ('usuario', 'endereco_entrega', 'total', 'data_atualizacao')
    search_fields = ('usuario__email',)
    raw_id_fields = ('usuario', 'endereco_entrega')
    inlines = [ItemCarrinhoInline]

    @admin.display(description='Total')
    def total(self, obj):
        return formatar_centavos_brl(obj.total_em_centavos)
