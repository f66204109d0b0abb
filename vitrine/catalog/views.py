# vitrine/catalog/views.py
from django.contrib import messages
from django.shortcuts import redirect, render
from django.views import View

from vitrine.core.dependency_injection import (
    get_detalhar_variante_use_case,
    get_listar_produtos_use_case,
)
from vitrine.core.exceptions import ErroPersistencia, VarianteNaoEncontradaError
from vitrine.presentation.forms import AdicionarAoCarrinhoForm


# ====================================================================
# VIEWS DO CATÁLOGO (PÚBLICO)
# ====================================================================

class ListaProdutosView(View):
    """Página inicial: lista os produtos com suas variantes."""
    template_name = 'catalog/lista_produtos.html'

    def get(self, request):
        listar_uc = get_listar_produtos_use_case()
        try:
            produtos = listar_uc.executar()
        except ErroPersistencia as e:
            messages.error(request, e.message)
            produtos = []

        context = {
            'produtos': produtos,
        }
        return render(request, self.template_name, context)


class DetalheVarianteView(View):
    """Página da variante, com o seletor das demais variantes do mesmo produto."""
    template_name = 'catalog/detalhe_variante.html'

    def get(self, request, slug):
        detalhar_uc = get_detalhar_variante_use_case()

        try:
            variante = detalhar_uc.executar(slug)
        except VarianteNaoEncontradaError:
            messages.error(request, "O produto solicitado não foi encontrado.")
            return redirect('home')

        context = {
            'variante': variante,
            'produto': variante.produto,
            'variantes': detalhar_uc.listar_variantes(variante),
            'form': AdicionarAoCarrinhoForm(initial={'variante_id': variante.id}),
        }
        return render(request, self.template_name, context)
