# vitrine/urls.py
"""
Configuração principal de URL do projeto Vitrine.

Este arquivo centraliza o roteamento, incluindo:
1. Rotas do Catálogo (vitrine.catalog)
2. Rotas da Loja e da API (vitrine.presentation)
3. Rotas do Admin (Django Admin)
4. Rotas da Documentação da API (Swagger/Redoc)
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView


urlpatterns = [
    path('', include('vitrine.catalog.urls')),
    path('', include('vitrine.presentation.urls')),

    # URL para o painel de administração padrão do Django
    path('admin/', admin.site.urls),

    # ====================================================================
    # ROTAS DE DOCUMENTAÇÃO DA API (DRF SPECTACULAR)
    # ====================================================================
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/docs/swagger/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/docs/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]
