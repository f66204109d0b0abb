from django.contrib.auth.views import redirect_to_login
from django.http import JsonResponse
from django.shortcuts import redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views import View
from django.views.decorators.http import require_POST

from vitrine.core.dependency_injection import (
    get_adicionar_produto_use_case,
    get_atualizar_endereco_carrinho_use_case,
    get_criar_endereco_entrega_use_case,
    get_diminuir_quantidade_use_case,
    get_listar_enderecos_entrega_use_case,
    get_obter_carrinho_use_case,
    get_provedor_sessao,
    get_remover_item_carrinho_use_case,
)
from vitrine.core.exceptions import BaseErroCore, DadosInvalidosError

from .excecoes import corpo_do_erro, status_para_erro
from .forms import EnderecoEntregaForm
from .hooks import chave_carrinho, chave_enderecos, chaves_da_sessao, usar_consulta, usar_mutacao


# ====================================================================
# VIEWS: Orquestram a requisição, a execução dos casos de uso e a resposta.
# ====================================================================

provedor_sessao = get_provedor_sessao()


def _responder(request, corpo, status=200):
    """
    Responde em JSON para chamadas AJAX. Formulários HTML comuns enviam `next`
    e são redirecionados para a página de origem.
    """
    destino = request.POST.get('next')
    if destino and url_has_allowed_host_and_scheme(destino, allowed_hosts={request.get_host()}):
        return redirect(destino)
    return JsonResponse(corpo, status=status)


class CarrinhoView(View):
    """
    View para a página do carrinho de compras.
    """
    template_name = 'cart/carrinho.html'

    def get(self, request):
        sessao = provedor_sessao.obter_sessao(request)
        if sessao is None:
            return redirect_to_login(request.get_full_path())

        obter_carrinho_uc = get_obter_carrinho_use_case()
        carrinho = usar_consulta(
            chave_carrinho(sessao.usuario.id), lambda: obter_carrinho_uc.executar(sessao)
        )
        context = {
            'carrinho': carrinho,
        }
        return render(request, self.template_name, context)


@require_POST
def adicionar_ao_carrinho(request):
    """
    Adiciona uma variante ao carrinho ou aumenta sua quantidade em uma unidade.
    """
    sessao = provedor_sessao.obter_sessao(request)
    adicionar_uc = get_adicionar_produto_use_case()

    try:
        item = usar_mutacao(
            request,
            lambda: adicionar_uc.executar(sessao, request.POST),
            invalidar=chaves_da_sessao(sessao, chave_carrinho),
            sucesso="Produto adicionado ao carrinho.",
            erro="Erro ao adicionar produto ao carrinho.",
        )
    except BaseErroCore as e:
        return _responder(request, corpo_do_erro(e), status=status_para_erro(e))

    return _responder(request, {
        'success': True,
        'message': 'Produto adicionado ao carrinho.',
        'item_id': item.id,
        'quantidade': item.quantidade,
    })


@require_POST
def remover_do_carrinho(request, item_id):
    """
    Remove um item do carrinho (requisição AJAX).
    """
    sessao = provedor_sessao.obter_sessao(request)
    remover_uc = get_remover_item_carrinho_use_case()

    try:
        usar_mutacao(
            request,
            lambda: remover_uc.executar(sessao, {'item_carrinho_id': item_id}),
            invalidar=chaves_da_sessao(sessao, chave_carrinho),
            sucesso="Produto removido do carrinho.",
            erro="Erro ao remover produto do carrinho.",
        )
    except BaseErroCore as e:
        return _responder(request, corpo_do_erro(e), status=status_para_erro(e))

    return _responder(request, {'success': True, 'message': 'Produto removido do carrinho.'})


@require_POST
def diminuir_quantidade_item(request, item_id):
    """
    Diminui em uma unidade a quantidade de um item (requisição AJAX).
    """
    sessao = provedor_sessao.obter_sessao(request)
    diminuir_uc = get_diminuir_quantidade_use_case()

    try:
        nova_quantidade = usar_mutacao(
            request,
            lambda: diminuir_uc.executar(sessao, {'item_carrinho_id': item_id}),
            invalidar=chaves_da_sessao(sessao, chave_carrinho),
            sucesso="Quantidade do produto diminuida.",
            erro="Erro ao diminuir quantidade do produto.",
        )
    except BaseErroCore as e:
        return _responder(request, corpo_do_erro(e), status=status_para_erro(e))

    return _responder(request, {
        'success': True,
        'message': 'Quantidade do produto diminuida.',
        'quantidade': nova_quantidade,
        'removido': nova_quantidade == 0,
    })


# ====================================================================
# SELEÇÃO DE ENDEREÇO
# ====================================================================

class SelecaoEnderecoView(View):
    """
    Lista de endereços do usuário com o formulário de novo endereço.

    Um único componente atende aos dois usos:
    - modo "avulso": caderno de endereços da conta;
    - modo "carrinho": identificação do carrinho, onde o endereço escolhido
      é vinculado ao carrinho.
    """
    template_name = 'enderecos/selecao.html'
    modo = 'avulso'

    MODOS = ('avulso', 'carrinho')

    def dispatch(self, request, *args, **kwargs):
        if self.modo not in self.MODOS:
            raise ValueError(f"Modo de seleção inválido: {self.modo}")
        self.sessao = provedor_sessao.obter_sessao(request)
        if self.sessao is None:
            return redirect_to_login(request.get_full_path())
        return super().dispatch(request, *args, **kwargs)

    def get(self, request):
        return self.renderizar(request, EnderecoEntregaForm())

    def post(self, request):
        if request.POST.get('acao') == 'selecionar' and self.modo == 'carrinho':
            return self.selecionar(request)
        return self.criar(request)

    def criar(self, request):
        criar_uc = get_criar_endereco_entrega_use_case()
        form = EnderecoEntregaForm(request.POST)
        try:
            usar_mutacao(
                request,
                lambda: criar_uc.executar(self.sessao, request.POST),
                invalidar=chaves_da_sessao(self.sessao, chave_enderecos),
                sucesso="Endereço criado com sucesso!",
                erro="Erro ao criar endereço. Tente novamente.",
            )
        except DadosInvalidosError:
            form.is_valid()
            return self.renderizar(request, form, status=400)
        except BaseErroCore as e:
            return self.renderizar(request, form, status=status_para_erro(e))

        return redirect(request.path)

    def selecionar(self, request):
        atualizar_uc = get_atualizar_endereco_carrinho_use_case()
        try:
            usar_mutacao(
                request,
                lambda: atualizar_uc.executar(self.sessao, request.POST),
                invalidar=chaves_da_sessao(self.sessao, chave_carrinho),
                sucesso="Endereço de entrega atualizado.",
                erro="Erro ao atualizar endereço de entrega.",
            )
        except BaseErroCore as e:
            return self.renderizar(request, EnderecoEntregaForm(), status=status_para_erro(e))

        return redirect('carrinho')

    def renderizar(self, request, form, status=200):
        listar_uc = get_listar_enderecos_entrega_use_case()
        resultado = usar_consulta(
            chave_enderecos(self.sessao.usuario.id), lambda: listar_uc.executar(self.sessao)
        )
        enderecos = resultado.dados if resultado.sucesso else []
        selecionado = self.endereco_inicial(enderecos)

        context = {
            'modo': self.modo,
            'form': form,
            'enderecos': enderecos,
            'erro_enderecos': resultado.erro,
            'selecionado': str(selecionado) if selecionado else None,
        }
        return render(request, self.template_name, context, status=status)

    def endereco_inicial(self, enderecos):
        """O endereço já vinculado ao carrinho, ou o primeiro da lista."""
        if self.modo == 'carrinho':
            carrinho = usar_consulta(
                chave_carrinho(self.sessao.usuario.id),
                lambda: get_obter_carrinho_use_case().executar(self.sessao),
            )
            if carrinho.endereco_entrega_id:
                return carrinho.endereco_entrega_id
        return enderecos[0].id if enderecos else None
