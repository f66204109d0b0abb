# vitrine/presentation/views_api.py
"""
API REST (Django REST Framework) das ações da loja.

As permissões ficam abertas (AllowAny): a autenticação é decidida pelos casos
de uso, que levantam NaoAutenticadoError sem sessão. O EXCEPTION_HANDLER
(`vitrine.presentation.excecoes.tratar_excecao`) converte os erros da Core.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

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

from .hooks import chave_carrinho, chave_enderecos, chaves_da_sessao, usar_consulta, usar_mutacao
from .serializers import (
    CarrinhoSerializer,
    DiminuirItemCarrinhoSerializer,
    EnderecoEntregaSerializer,
    ItemCarrinhoSerializer,
    ResultadoEnderecosSerializer,
)

provedor_sessao = get_provedor_sessao()


class BaseLojaAPIView(APIView):
    permission_classes = [AllowAny]

    def obter_sessao(self, request):
        return provedor_sessao.obter_sessao(request)


class EnderecosAPIView(BaseLojaAPIView):
    """
    GET: lista os endereços do usuário (resultado etiquetado).
    POST: cadastra um novo endereço de entrega.
    """

    @extend_schema(responses=ResultadoEnderecosSerializer)
    def get(self, request):
        sessao = self.obter_sessao(request)
        listar_uc = get_listar_enderecos_entrega_use_case()

        if sessao is None:
            resultado = listar_uc.executar(None)
            codigo = status.HTTP_401_UNAUTHORIZED
        else:
            resultado = usar_consulta(
                chave_enderecos(sessao.usuario.id), lambda: listar_uc.executar(sessao)
            )
            codigo = status.HTTP_200_OK if resultado.sucesso else status.HTTP_503_SERVICE_UNAVAILABLE

        return Response(ResultadoEnderecosSerializer(resultado).data, status=codigo)

    @extend_schema(responses={201: EnderecoEntregaSerializer})
    def post(self, request):
        sessao = self.obter_sessao(request)
        criar_uc = get_criar_endereco_entrega_use_case()
        endereco = usar_mutacao(
            request,
            lambda: criar_uc.executar(sessao, request.data),
            invalidar=chaves_da_sessao(sessao, chave_enderecos),
        )
        return Response(EnderecoEntregaSerializer(endereco).data, status=status.HTTP_201_CREATED)


class CarrinhoAPIView(BaseLojaAPIView):
    """
    Retorna o carrinho do usuário autenticado (vazio se ainda não existir).
    """

    @extend_schema(responses=CarrinhoSerializer)
    def get(self, request):
        sessao = self.obter_sessao(request)
        obter_uc = get_obter_carrinho_use_case()
        if sessao is None:
            carrinho = obter_uc.executar(None)
        else:
            carrinho = usar_consulta(chave_carrinho(sessao.usuario.id), lambda: obter_uc.executar(sessao))
        return Response(CarrinhoSerializer(carrinho).data)


class ItensCarrinhoAPIView(BaseLojaAPIView):
    """
    Adiciona uma variante ao carrinho (ou incrementa a quantidade existente).
    """

    @extend_schema(responses={201: ItemCarrinhoSerializer})
    def post(self, request):
        sessao = self.obter_sessao(request)
        adicionar_uc = get_adicionar_produto_use_case()
        item = usar_mutacao(
            request,
            lambda: adicionar_uc.executar(sessao, request.data),
            invalidar=chaves_da_sessao(sessao, chave_carrinho),
        )
        return Response(ItemCarrinhoSerializer(item).data, status=status.HTTP_201_CREATED)


class ItemCarrinhoAPIView(BaseLojaAPIView):
    """
    Remove um item do carrinho.
    """

    @extend_schema(responses={204: None})
    def delete(self, request, item_id):
        sessao = self.obter_sessao(request)
        remover_uc = get_remover_item_carrinho_use_case()
        usar_mutacao(
            request,
            lambda: remover_uc.executar(sessao, {'item_carrinho_id': item_id}),
            invalidar=chaves_da_sessao(sessao, chave_carrinho),
        )
        return Response(status=status.HTTP_204_NO_CONTENT)


class DiminuirItemCarrinhoAPIView(BaseLojaAPIView):
    """
    Diminui em uma unidade a quantidade de um item; na última unidade, remove o item.
    """

    @extend_schema(request=None, responses=DiminuirItemCarrinhoSerializer)
    def post(self, request, item_id):
        sessao = self.obter_sessao(request)
        diminuir_uc = get_diminuir_quantidade_use_case()
        nova_quantidade = usar_mutacao(
            request,
            lambda: diminuir_uc.executar(sessao, {'item_carrinho_id': item_id}),
            invalidar=chaves_da_sessao(sessao, chave_carrinho),
        )
        return Response(
            DiminuirItemCarrinhoSerializer({'quantidade': nova_quantidade, 'removido': nova_quantidade == 0}).data
        )


class EnderecoEntregaCarrinhoAPIView(BaseLojaAPIView):
    """
    Vincula ao carrinho um endereço de entrega do próprio usuário.
    """

    @extend_schema(responses=CarrinhoSerializer)
    def put(self, request):
        sessao = self.obter_sessao(request)
        atualizar_uc = get_atualizar_endereco_carrinho_use_case()
        carrinho = usar_mutacao(
            request,
            lambda: atualizar_uc.executar(sessao, request.data),
            invalidar=chaves_da_sessao(sessao, chave_carrinho),
        )
        return Response(CarrinhoSerializer(carrinho).data)

    @extend_schema(responses=CarrinhoSerializer)
    def patch(self, request):
        return self.put(request)
