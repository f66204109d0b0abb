"""
Define as URLs para a camada de apresentação (o frontend da loja) e as rotas de API REST.
Inclui rotas de carrinho, endereços de entrega e autenticação.
"""
from django.urls import path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from . import views, views_api, views_auth

urlpatterns = [
    # ====================================================================
    # 1. ROTAS DE COMPRA (CARRINHO E IDENTIFICAÇÃO)
    # ====================================================================
    path('carrinho/', views.CarrinhoView.as_view(), name='carrinho'),
    path('carrinho/adicionar/', views.adicionar_ao_carrinho, name='adicionar_carrinho'),
    path('carrinho/remover/<str:item_id>/', views.remover_do_carrinho, name='remover_carrinho'),
    path('carrinho/diminuir/<str:item_id>/', views.diminuir_quantidade_item, name='diminuir_carrinho'),
    path(
        'carrinho/identificacao/',
        views.SelecaoEnderecoView.as_view(modo='carrinho'),
        name='identificacao_carrinho',
    ),

    # ====================================================================
    # 2. ROTAS DE PERFIL (ÁREA DO CLIENTE)
    # ====================================================================
    path(
        'minha-conta/enderecos/',
        views.SelecaoEnderecoView.as_view(modo='avulso'),
        name='enderecos_usuario',
    ),

    # ====================================================================
    # 3. ROTAS DE AUTENTICAÇÃO
    # ====================================================================
    path('login/', views_auth.LoginView.as_view(), name='login'),
    path('cadastro/', views_auth.CadastroUsuarioView.as_view(), name='cadastro'),
    path('logout/', views_auth.logout_usuario, name='logout'),

    # ====================================================================
    # 4. ROTAS DE API (Django REST Framework)
    # ====================================================================
    path('api/token/', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('api/token/refresh/', TokenRefreshView.as_view(), name='token_refresh'),
    path('api/enderecos/', views_api.EnderecosAPIView.as_view(), name='api_enderecos'),
    path('api/carrinho/', views_api.CarrinhoAPIView.as_view(), name='api_carrinho'),
    path('api/carrinho/itens/', views_api.ItensCarrinhoAPIView.as_view(), name='api_carrinho_itens'),
    path('api/carrinho/itens/<str:item_id>/', views_api.ItemCarrinhoAPIView.as_view(), name='api_carrinho_item'),
    path(
        'api/carrinho/itens/<str:item_id>/diminuir/',
        views_api.DiminuirItemCarrinhoAPIView.as_view(),
        name='api_carrinho_item_diminuir',
    ),
    path(
        'api/carrinho/endereco-entrega/',
        views_api.EnderecoEntregaCarrinhoAPIView.as_view(),
        name='api_carrinho_endereco',
    ),
]
