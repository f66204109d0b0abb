import uuid

from django.contrib.auth import get_user_model
from django.contrib.messages import get_messages
from django.contrib.messages.storage.fallback import FallbackStorage
from django.contrib.sessions.backends.cache import SessionStore
from django.core.cache import cache
from django.test import RequestFactory, TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase
from rest_framework_simplejwt.tokens import RefreshToken

from vitrine.carrinho.models import Carrinho as CarrinhoModel, ItemCarrinho as ItemCarrinhoModel
from vitrine.catalog.models import Categoria, Produto, VarianteProduto
from vitrine.core.entities import Resultado
from vitrine.core.exceptions import AcessoNegadoError, ErroPersistencia
from vitrine.infrastructure.models import EnderecoEntrega as EnderecoEntregaModel
from vitrine.presentation.excecoes import status_para_erro, tratar_excecao
from vitrine.presentation.hooks import usar_consulta, usar_mutacao
from vitrine.presentation.templatetags.formatacao import brl

Usuario = get_user_model()

DADOS_ENDERECO = {
    'email': 'ana@example.com',
    'primeiro_nome': 'Ana',
    'sobrenome': 'Silva',
    'cpf_cnpj': '123.456.789-01',
    'telefone': '(11) 98765-4321',
    'cep': '01001000',
    'endereco': 'Praça da Sé',
    'numero': '100',
    'complemento': '',
    'bairro': 'Sé',
    'cidade': 'São Paulo',
    'estado': 'SP',
}


def criar_variante(nome='Preta', preco=7990):
    categoria, _ = Categoria.objects.get_or_create(nome='Camisetas')
    produto, _ = Produto.objects.get_or_create(nome='Camiseta Básica', defaults={'categoria': categoria})
    return VarianteProduto.objects.create(produto=produto, nome=nome, preco_em_centavos=preco)


def criar_endereco(usuario, nome='Ana Silva'):
    return EnderecoEntregaModel.objects.create(
        usuario=usuario, nome_destinatario=nome, rua='Rua A', numero='1', bairro='Centro',
        cidade='Recife', estado='PE', cep='50000000', telefone='81999999999',
        email='ana@example.com', cpf_ou_cnpj='12345678901',
    )


def criar_item(usuario, variante, quantidade=1):
    carrinho, _ = CarrinhoModel.objects.get_or_create(usuario=usuario)
    return ItemCarrinhoModel.objects.create(carrinho=carrinho, variante=variante, quantidade=quantidade)


# ====================================================================
# API (DRF)
# ====================================================================

class BaseAPITestCase(APITestCase):

    def setUp(self):
        cache.clear()
        self.usuario = Usuario.objects.create_user(email='ana@example.com', password='senha-forte-123')
        self.outro = Usuario.objects.create_user(email='bia@example.com', password='senha-forte-123')
        self.variante = criar_variante()

    def autenticar(self, usuario=None):
        token = RefreshToken.for_user(usuario or self.usuario).access_token
        self.client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')


class EnderecosAPITestCase(BaseAPITestCase):

    def test_criar_e_listar_endereco(self):
        """
        Cenário: Ana Silva / CEP 01001000 é gravado como "Ana Silva" e listado de volta separado.
        """
        self.autenticar()

        resposta = self.client.post(reverse('api_enderecos'), DADOS_ENDERECO, format='json')

        self.assertEqual(resposta.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resposta.data['nome_destinatario'], 'Ana Silva')
        self.assertEqual(resposta.data['cep'], '01001000')
        self.assertEqual(resposta.data['pais'], 'Brasil')
        self.assertIsNone(resposta.data['complemento'])

        lista = self.client.get(reverse('api_enderecos'))

        self.assertEqual(lista.status_code, status.HTTP_200_OK)
        self.assertTrue(lista.data['sucesso'])
        self.assertEqual(lista.data['dados'][0]['primeiro_nome'], 'Ana')
        self.assertEqual(lista.data['dados'][0]['sobrenome'], 'Silva')
        self.assertEqual(lista.data['dados'][0]['cpf_cnpj'], '12345678901')
        self.assertEqual(lista.data['dados'][0]['telefone'], '11987654321')

    def test_lista_vazia(self):
        self.autenticar()

        resposta = self.client.get(reverse('api_enderecos'))

        self.assertEqual(resposta.data, {'sucesso': True, 'dados': [], 'erro': None})

    def test_lista_mostra_apenas_enderecos_do_usuario(self):
        criar_endereco(self.outro, nome='Bia Costa')
        self.autenticar()

        resposta = self.client.get(reverse('api_enderecos'))

        self.assertEqual(resposta.data['dados'], [])

    def test_sem_sessao(self):
        resposta = self.client.post(reverse('api_enderecos'), DADOS_ENDERECO, format='json')
        lista = self.client.get(reverse('api_enderecos'))

        self.assertEqual(resposta.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(lista.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(lista.data['sucesso'])
        self.assertEqual(lista.data['erro'], 'Usuário não autenticado.')
        self.assertEqual(EnderecoEntregaModel.objects.count(), 0)

    def test_dados_invalidos(self):
        self.autenticar()
        dados = dict(DADOS_ENDERECO, cep='123')

        resposta = self.client.post(reverse('api_enderecos'), dados, format='json')

        self.assertEqual(resposta.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(resposta.data['errors']['cep'], ['CEP deve ter 8 dígitos'])
        self.assertEqual(EnderecoEntregaModel.objects.count(), 0)

    def test_criar_invalida_a_lista_em_cache(self):
        self.autenticar()
        self.assertEqual(self.client.get(reverse('api_enderecos')).data['dados'], [])

        self.client.post(reverse('api_enderecos'), DADOS_ENDERECO, format='json')

        self.assertEqual(len(self.client.get(reverse('api_enderecos')).data['dados']), 1)


class ItensCarrinhoAPITestCase(BaseAPITestCase):

    def url_item(self, item_id):
        return reverse('api_carrinho_item', args=[item_id])

    def url_diminuir(self, item_id):
        return reverse('api_carrinho_item_diminuir', args=[item_id])

    def test_remover_item(self):
        item = criar_item(self.usuario, self.variante)
        self.autenticar()

        resposta = self.client.delete(self.url_item(item.pk))

        self.assertEqual(resposta.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(ItemCarrinhoModel.objects.filter(pk=item.pk).exists())

    def test_remover_duas_vezes_retorna_nao_encontrado(self):
        item = criar_item(self.usuario, self.variante)
        self.autenticar()

        self.client.delete(self.url_item(item.pk))
        resposta = self.client.delete(self.url_item(item.pk))

        self.assertEqual(resposta.status_code, status.HTTP_404_NOT_FOUND)

    def test_item_de_outro_usuario_e_proibido(self):
        item = criar_item(self.outro, self.variante, quantidade=2)
        self.autenticar()

        remover = self.client.delete(self.url_item(item.pk))
        diminuir = self.client.post(self.url_diminuir(item.pk))

        self.assertEqual(remover.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(diminuir.status_code, status.HTTP_403_FORBIDDEN)
        self.assertEqual(ItemCarrinhoModel.objects.get(pk=item.pk).quantidade, 2)

    def test_diminuir_quantidade(self):
        item = criar_item(self.usuario, self.variante, quantidade=3)
        self.autenticar()

        resposta = self.client.post(self.url_diminuir(item.pk))

        self.assertEqual(resposta.data, {'quantidade': 2, 'removido': False})
        self.assertEqual(ItemCarrinhoModel.objects.get(pk=item.pk).quantidade, 2)

    def test_diminuir_ultima_unidade_remove(self):
        item = criar_item(self.usuario, self.variante, quantidade=1)
        self.autenticar()

        resposta = self.client.post(self.url_diminuir(item.pk))

        self.assertEqual(resposta.data, {'quantidade': 0, 'removido': True})
        self.assertFalse(ItemCarrinhoModel.objects.filter(pk=item.pk).exists())

    def test_item_inexistente(self):
        self.autenticar()

        remover = self.client.delete(self.url_item(uuid.uuid4()))
        diminuir = self.client.post(self.url_diminuir(uuid.uuid4()))

        self.assertEqual(remover.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(diminuir.status_code, status.HTTP_404_NOT_FOUND)

    def test_id_invalido(self):
        self.autenticar()

        resposta = self.client.delete(self.url_item('abc'))

        self.assertEqual(resposta.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('item_carrinho_id', resposta.data['errors'])

    def test_sem_sessao_nada_e_alterado(self):
        item = criar_item(self.usuario, self.variante, quantidade=2)

        remover = self.client.delete(self.url_item(item.pk))
        diminuir = self.client.post(self.url_diminuir(item.pk))

        self.assertEqual(remover.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(diminuir.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(ItemCarrinhoModel.objects.get(pk=item.pk).quantidade, 2)

    def test_adicionar_e_consultar_carrinho(self):
        self.autenticar()

        self.client.post(reverse('api_carrinho_itens'), {'variante_id': str(self.variante.pk)}, format='json')
        resposta = self.client.post(
            reverse('api_carrinho_itens'), {'variante_id': str(self.variante.pk), 'quantidade': 2}, format='json'
        )

        self.assertEqual(resposta.status_code, status.HTTP_201_CREATED)
        self.assertEqual(resposta.data['quantidade'], 3)

        carrinho = self.client.get(reverse('api_carrinho'))

        self.assertEqual(carrinho.data['quantidade_total'], 3)
        self.assertEqual(carrinho.data['total_em_centavos'], 23970)
        self.assertEqual(carrinho.data['total_formatado'], 'R$ 239,70')
        self.assertEqual(carrinho.data['itens'][0]['nome_produto'], 'Camiseta Básica')

    def test_carrinho_inexistente_e_vazio(self):
        self.autenticar()

        resposta = self.client.get(reverse('api_carrinho'))

        self.assertEqual(resposta.status_code, status.HTTP_200_OK)
        self.assertEqual(resposta.data['itens'], [])
        self.assertEqual(resposta.data['total_em_centavos'], 0)

    def test_consultar_carrinho_sem_sessao(self):
        resposta = self.client.get(reverse('api_carrinho'))
        self.assertEqual(resposta.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_api_do_carrinho_reflete_exclusao_feita_pelo_orm(self):
        item = criar_item(self.usuario, self.variante, quantidade=2)
        self.autenticar()
        self.assertEqual(len(self.client.get(reverse('api_carrinho')).data['itens']), 1)

        ItemCarrinhoModel.objects.filter(pk=item.pk).delete()

        self.assertEqual(self.client.get(reverse('api_carrinho')).data['itens'], [])

    def test_esquema_documenta_a_resposta_de_diminuir(self):
        resposta = self.client.get(reverse('schema'))

        self.assertEqual(resposta.status_code, status.HTTP_200_OK)
        conteudo = resposta.content.decode()
        self.assertIn('DiminuirItemCarrinho', conteudo)
        self.assertIn('removido', conteudo)


class EnderecoEntregaCarrinhoAPITestCase(BaseAPITestCase):

    def test_vincular_endereco_proprio(self):
        endereco = criar_endereco(self.usuario)
        self.autenticar()

        resposta = self.client.put(
            reverse('api_carrinho_endereco'), {'endereco_entrega_id': str(endereco.pk)}, format='json'
        )

        self.assertEqual(resposta.status_code, status.HTTP_200_OK)
        self.assertEqual(resposta.data['endereco_entrega_id'], str(endereco.pk))
        self.assertEqual(CarrinhoModel.objects.get(usuario=self.usuario).endereco_entrega_id, endereco.pk)

    def test_endereco_de_outro_usuario_e_proibido(self):
        endereco = criar_endereco(self.outro)
        self.autenticar()

        resposta = self.client.patch(
            reverse('api_carrinho_endereco'), {'endereco_entrega_id': str(endereco.pk)}, format='json'
        )

        self.assertEqual(resposta.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(CarrinhoModel.objects.filter(usuario=self.usuario).exists())

    def test_endereco_inexistente(self):
        self.autenticar()

        resposta = self.client.put(
            reverse('api_carrinho_endereco'), {'endereco_entrega_id': str(uuid.uuid4())}, format='json'
        )

        self.assertEqual(resposta.status_code, status.HTTP_404_NOT_FOUND)

    def test_token_de_acesso_por_email(self):
        resposta = self.client.post(
            reverse('token_obtain_pair'), {'email': 'ana@example.com', 'password': 'senha-forte-123'}, format='json'
        )

        self.assertEqual(resposta.status_code, status.HTTP_200_OK)
        self.assertIn('access', resposta.data)


# ====================================================================
# PÁGINAS HTML
# ====================================================================

class BaseViewTestCase(TestCase):

    def setUp(self):
        cache.clear()
        self.usuario = Usuario.objects.create_user(
            email='ana@example.com', password='senha-forte-123', first_name='Ana'
        )
        self.outro = Usuario.objects.create_user(email='bia@example.com', password='senha-forte-123')
        self.variante = criar_variante()

    def mensagens(self, resposta):
        return [str(m) for m in get_messages(resposta.wsgi_request)]


class CarrinhoViewsTestCase(BaseViewTestCase):

    def test_carrinho_exige_login(self):
        resposta = self.client.get(reverse('carrinho'))
        self.assertRedirects(resposta, f"{reverse('login')}?next={reverse('carrinho')}")

    def test_carrinho_exibe_itens(self):
        criar_item(self.usuario, self.variante, quantidade=2)
        self.client.force_login(self.usuario)

        resposta = self.client.get(reverse('carrinho'))

        self.assertContains(resposta, 'Camiseta Básica')
        self.assertContains(resposta, 'R$ 159,80')

    def test_remover_item_publica_mensagem(self):
        item = criar_item(self.usuario, self.variante)
        self.client.force_login(self.usuario)

        resposta = self.client.post(reverse('remover_carrinho', args=[item.pk]))

        self.assertEqual(resposta.status_code, 200)
        self.assertTrue(resposta.json()['success'])
        self.assertIn('Produto removido do carrinho.', self.mensagens(resposta))

    def test_remover_item_de_outro_usuario(self):
        item = criar_item(self.outro, self.variante)
        self.client.force_login(self.usuario)

        resposta = self.client.post(reverse('remover_carrinho', args=[item.pk]))

        self.assertEqual(resposta.status_code, 403)
        self.assertIn('Erro ao remover produto do carrinho.', self.mensagens(resposta))
        self.assertTrue(ItemCarrinhoModel.objects.filter(pk=item.pk).exists())

    def test_diminuir_quantidade(self):
        item = criar_item(self.usuario, self.variante, quantidade=2)
        self.client.force_login(self.usuario)

        resposta = self.client.post(reverse('diminuir_carrinho', args=[item.pk]))

        self.assertEqual(resposta.json()['quantidade'], 1)
        self.assertIn('Quantidade do produto diminuida.', self.mensagens(resposta))

    def test_mutacao_invalida_o_carrinho_em_cache(self):
        item = criar_item(self.usuario, self.variante, quantidade=2)
        self.client.force_login(self.usuario)
        self.assertContains(self.client.get(reverse('carrinho')), 'R$ 159,80')

        self.client.post(reverse('diminuir_carrinho', args=[item.pk]))

        resposta = self.client.get(reverse('carrinho'))
        self.assertContains(resposta, 'Subtotal: R$ 79,90')

    def test_item_excluido_pelo_orm_sai_do_carrinho_em_cache(self):
        """
        Cenário: o item é excluído fora dos casos de uso (admin/shell) entre duas visitas à página.
        """
        item = criar_item(self.usuario, self.variante, quantidade=2)
        self.client.force_login(self.usuario)
        self.assertContains(self.client.get(reverse('carrinho')), 'R$ 159,80')

        ItemCarrinhoModel.objects.filter(pk=item.pk).delete()

        resposta = self.client.get(reverse('carrinho'))
        self.assertNotContains(resposta, 'R$ 159,80')
        self.assertContains(resposta, 'Seu carrinho está vazio.')

    def test_variante_excluida_remove_o_item_em_cascata_do_cache(self):
        criar_item(self.usuario, self.variante, quantidade=2)
        self.client.force_login(self.usuario)
        self.assertContains(self.client.get(reverse('carrinho')), 'Camiseta Básica')

        self.variante.delete()

        self.assertContains(self.client.get(reverse('carrinho')), 'Seu carrinho está vazio.')

    def test_quantidade_alterada_pelo_admin_atualiza_o_cache(self):
        item = criar_item(self.usuario, self.variante, quantidade=2)
        self.client.force_login(self.usuario)
        self.assertContains(self.client.get(reverse('carrinho')), 'Subtotal: R$ 159,80')

        item.quantidade = 3
        item.save()

        self.assertContains(self.client.get(reverse('carrinho')), 'Subtotal: R$ 239,70')

    def test_adicionar_com_next_redireciona(self):
        self.client.force_login(self.usuario)

        resposta = self.client.post(reverse('adicionar_carrinho'), {
            'variante_id': str(self.variante.pk),
            'next': reverse('carrinho'),
        })

        self.assertRedirects(resposta, reverse('carrinho'))
        self.assertEqual(ItemCarrinhoModel.objects.get(carrinho__usuario=self.usuario).quantidade, 1)

    def test_adicionar_sem_sessao(self):
        resposta = self.client.post(reverse('adicionar_carrinho'), {'variante_id': str(self.variante.pk)})

        self.assertEqual(resposta.status_code, 401)
        self.assertFalse(ItemCarrinhoModel.objects.exists())

    def test_metodo_get_nao_permitido(self):
        self.client.force_login(self.usuario)
        resposta = self.client.get(reverse('adicionar_carrinho'))
        self.assertEqual(resposta.status_code, 405)


class SelecaoEnderecoViewTestCase(BaseViewTestCase):

    def test_modo_avulso_lista_e_cria(self):
        self.client.force_login(self.usuario)

        resposta = self.client.post(reverse('enderecos_usuario'), dict(DADOS_ENDERECO, acao='criar'), follow=True)

        self.assertRedirects(resposta, reverse('enderecos_usuario'))
        self.assertContains(resposta, 'Ana Silva - Praça da Sé, 100')
        self.assertContains(resposta, 'Endereço criado com sucesso!')
        self.assertEqual(resposta.context['modo'], 'avulso')

    def test_formulario_invalido_exibe_erros(self):
        self.client.force_login(self.usuario)

        resposta = self.client.post(reverse('enderecos_usuario'), dict(DADOS_ENDERECO, cep='1'))

        self.assertEqual(resposta.status_code, 400)
        self.assertContains(resposta, 'CEP deve ter 8 dígitos', status_code=400)
        self.assertContains(resposta, 'Erro ao criar endereço. Tente novamente.', status_code=400)
        self.assertEqual(EnderecoEntregaModel.objects.count(), 0)

    def test_modo_carrinho_seleciona_primeiro_endereco(self):
        primeiro = criar_endereco(self.usuario)
        self.client.force_login(self.usuario)

        resposta = self.client.get(reverse('identificacao_carrinho'))

        self.assertEqual(resposta.context['modo'], 'carrinho')
        self.assertEqual(resposta.context['selecionado'], str(primeiro.pk))

    def test_modo_carrinho_vincula_endereco(self):
        endereco = criar_endereco(self.usuario)
        self.client.force_login(self.usuario)

        resposta = self.client.post(reverse('identificacao_carrinho'), {
            'acao': 'selecionar',
            'endereco_entrega_id': str(endereco.pk),
        })

        self.assertRedirects(resposta, reverse('carrinho'))
        self.assertEqual(CarrinhoModel.objects.get(usuario=self.usuario).endereco_entrega_id, endereco.pk)

    def test_modo_carrinho_endereco_de_outro_usuario(self):
        endereco = criar_endereco(self.outro)
        self.client.force_login(self.usuario)

        resposta = self.client.post(reverse('identificacao_carrinho'), {
            'acao': 'selecionar',
            'endereco_entrega_id': str(endereco.pk),
        })

        self.assertEqual(resposta.status_code, 403)
        self.assertFalse(CarrinhoModel.objects.filter(usuario=self.usuario, endereco_entrega=endereco).exists())

    def test_exige_login(self):
        resposta = self.client.get(reverse('enderecos_usuario'))
        self.assertEqual(resposta.status_code, 302)


class AutenticacaoViewsTestCase(BaseViewTestCase):

    def test_login_com_sucesso(self):
        resposta = self.client.post(reverse('login'), {'email': 'ana@example.com', 'password': 'senha-forte-123'})

        self.assertRedirects(resposta, reverse('home'))

    def test_login_invalido(self):
        resposta = self.client.post(reverse('login'), {'email': 'ana@example.com', 'password': 'senha-errada'})

        self.assertEqual(resposta.status_code, 200)
        self.assertContains(resposta, 'Email ou senha inválidos.')

    def test_cadastro(self):
        resposta = self.client.post(reverse('cadastro'), {
            'first_name': 'Carla',
            'last_name': 'Lima',
            'email': 'carla@example.com',
            'password': 'senha-forte-123',
            'password_confirm': 'senha-forte-123',
        })

        self.assertRedirects(resposta, reverse('login'))
        self.assertTrue(Usuario.objects.get(email='carla@example.com').check_password('senha-forte-123'))

    def test_cadastro_senhas_diferentes(self):
        resposta = self.client.post(reverse('cadastro'), {
            'first_name': 'Carla',
            'last_name': 'Lima',
            'email': 'carla@example.com',
            'password': 'senha-forte-123',
            'password_confirm': 'outra-senha-123',
        })

        self.assertContains(resposta, 'As senhas não coincidem.')
        self.assertFalse(Usuario.objects.filter(email='carla@example.com').exists())


class CatalogoViewsTestCase(BaseViewTestCase):

    def test_home_lista_produtos(self):
        resposta = self.client.get(reverse('home'))

        self.assertContains(resposta, 'Camiseta Básica')
        self.assertContains(resposta, 'R$ 79,90')

    def test_detalhe_variante_com_seletor(self):
        criar_variante(nome='Branca')

        resposta = self.client.get(reverse('detalhe_variante', args=[self.variante.slug]))

        self.assertEqual(len(resposta.context['variantes']), 2)
        self.assertContains(resposta, 'class="selecionada"')

    def test_variante_inexistente_redireciona(self):
        resposta = self.client.get(reverse('detalhe_variante', args=['nao-existe']))
        self.assertRedirects(resposta, reverse('home'))


# ====================================================================
# HOOKS, EXCEÇÕES E FILTROS
# ====================================================================

class HooksTestCase(TestCase):

    def setUp(self):
        cache.clear()
        self.request = RequestFactory().post('/')
        self.request.session = SessionStore()
        self.request._messages = FallbackStorage(self.request)

    def test_mutacao_com_sucesso_invalida_e_notifica(self):
        cache.set('chave', 'valor')

        resultado = usar_mutacao(self.request, lambda: 42, invalidar=['chave'], sucesso='Feito!')

        self.assertEqual(resultado, 42)
        self.assertIsNone(cache.get('chave'))
        self.assertEqual([str(m) for m in get_messages(self.request)], ['Feito!'])

    def test_mutacao_com_erro_nao_invalida(self):
        cache.set('chave', 'valor')

        def acao():
            raise AcessoNegadoError()

        with self.assertRaises(AcessoNegadoError):
            usar_mutacao(self.request, acao, invalidar=['chave'], erro='Falhou.')

        self.assertEqual(cache.get('chave'), 'valor')
        self.assertEqual([str(m) for m in get_messages(self.request)], ['Falhou.'])

    def test_consulta_guarda_apenas_sucesso(self):
        falha = usar_consulta('falha', lambda: Resultado.falha('erro'))
        self.assertFalse(falha.sucesso)
        self.assertIsNone(cache.get('falha'))

        usar_consulta('sucesso', lambda: Resultado.ok([1]))
        self.assertEqual(usar_consulta('sucesso', lambda: Resultado.ok([2])).dados, [1])


class ExcecoesTestCase(TestCase):

    def test_status_para_erro(self):
        self.assertEqual(status_para_erro(AcessoNegadoError()), 403)
        self.assertEqual(status_para_erro(ErroPersistencia()), 503)

    def test_tratar_excecao_de_persistencia(self):
        resposta = tratar_excecao(ErroPersistencia(), {'view': None})

        self.assertEqual(resposta.status_code, 503)
        self.assertEqual(resposta.data['message'], 'Falha ao acessar o banco de dados.')

    def test_filtro_brl(self):
        self.assertEqual(brl(123456), 'R$ 1.234,56')
        self.assertEqual(brl(None), '')
