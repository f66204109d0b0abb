from django.urls import path
from . import views

urlpatterns = [
    path('', views.ListaProdutosView.as_view(), name='home'),
    path('produto/<slug:slug>/', views.DetalheVarianteView.as_view(), name='detalhe_variante'),
]
