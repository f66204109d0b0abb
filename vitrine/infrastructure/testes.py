import uuid
from datetime import timedelta
from io import StringIO
from unittest.mock import patch

from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import DatabaseError
from django.db.utils import OperationalError
from django.test import RequestFactory, TestCase
from django.utils import timezone
from rest_framework_simplejwt.tokens import RefreshToken

# Importamos as classes que queremos testar
from vitrine.carrinho.models import Carrinho as CarrinhoModel, ItemCarrinho as ItemCarrinhoModel
from vitrine.catalog.models import Categoria, Produto, VarianteProduto
from vitrine.core.entities import EnderecoEntrega as EnderecoEntregaEntity
from vitrine.core.exceptions import ErroPersistencia, ItemCarrinhoNaoEncontradoError
from vitrine.infrastructure.models import EnderecoEntrega as EnderecoEntregaModel
from vitrine.infrastructure.repositories import (
    CarrinhoRepositoryDjango,
    CatalogoRepositoryDjango,
    EnderecoEntregaRepositoryDjango,
)
from vitrine.infrastructure.sessao import ProvedorSessaoDjango

Usuario = get_user_model()


def criar_variante(nome_produto='Camiseta Básica', nome='Preta', preco=7990):
    categoria, _ = Categoria.objects.get_or_create(nome='Camisetas')
    produto, _ = Produto.objects.get_or_create(nome=nome_produto, defaults={'categoria': categoria})
    return VarianteProduto.objects.create(produto=produto, nome=nome, preco_em_centavos=preco)


def endereco_entity(usuario_id, nome='Ana Silva'):
    return EnderecoEntregaEntity(
        usuario_id=str(usuario_id),
        nome_destinatario=nome,
        rua='Praça da Sé',
        numero='100',
        bairro='Sé',
        cidade='São Paulo',
        estado='SP',
        cep='01001000',
        telefone='11987654321',
        email='ana@example.com',
        cpf_ou_cnpj='12345678901',
    )


class EnderecoEntregaRepositoryTestCase(TestCase):

    def setUp(self):
        self.repository = EnderecoEntregaRepositoryDjango()
        self.usuario = Usuario.objects.create_user(email='ana@example.com', password='senha-forte-123')
        self.outro = Usuario.objects.create_user(email='bia@example.com', password='senha-forte-123')

    def test_criar_e_buscar_por_id(self):
        """
        Cenário: o endereço criado é persistido com país Brasil e pode ser buscado pelo id.
        """
        criado = self.repository.criar(endereco_entity(self.usuario.pk))

        encontrado = self.repository.buscar_por_id(criado.id)

        self.assertEqual(encontrado.nome_destinatario, 'Ana Silva')
        self.assertEqual(encontrado.pais, 'Brasil')
        self.assertEqual(encontrado.usuario_id, str(self.usuario.pk))
        self.assertIsNone(encontrado.complemento)
        self.assertIsNotNone(encontrado.data_criacao)

    def test_buscar_por_id_inexistente_ou_invalido(self):
        self.assertIsNone(self.repository.buscar_por_id(str(uuid.uuid4())))
        self.assertIsNone(self.repository.buscar_por_id('nao-e-uuid'))

    def test_listar_apenas_do_usuario_em_ordem_de_criacao(self):
        primeiro = self.repository.criar(endereco_entity(self.usuario.pk, nome='Ana Silva'))
        segundo = self.repository.criar(endereco_entity(self.usuario.pk, nome='Ana Souza'))
        self.repository.criar(endereco_entity(self.outro.pk, nome='Bia Costa'))
        # O segundo endereço é gravado com data posterior, independente da resolução do relógio
        EnderecoEntregaModel.objects.filter(pk=segundo.id).update(
            data_criacao=timezone.now() + timedelta(minutes=1)
        )

        enderecos = self.repository.listar_por_usuario(str(self.usuario.pk))

        self.assertEqual([e.id for e in enderecos], [primeiro.id, segundo.id])

    def test_erro_de_banco_vira_erro_de_persistencia(self):
        with patch.object(EnderecoEntregaModel.objects, 'filter', side_effect=DatabaseError('falhou')):
            with self.assertRaises(ErroPersistencia):
                self.repository.listar_por_usuario(str(self.usuario.pk))


class CarrinhoRepositoryTestCase(TestCase):

    def setUp(self):
        self.repository = CarrinhoRepositoryDjango()
        self.usuario = Usuario.objects.create_user(email='ana@example.com', password='senha-forte-123')
        self.outro = Usuario.objects.create_user(email='bia@example.com', password='senha-forte-123')
        self.variante = criar_variante()

    def test_buscar_por_usuario_sem_carrinho(self):
        self.assertIsNone(self.repository.buscar_por_usuario(str(self.usuario.pk)))

    def test_buscar_ou_criar_cria_uma_unica_vez(self):
        primeiro = self.repository.buscar_ou_criar(str(self.usuario.pk))
        segundo = self.repository.buscar_ou_criar(str(self.usuario.pk))

        self.assertEqual(primeiro.id, segundo.id)
        self.assertEqual(CarrinhoModel.objects.filter(usuario=self.usuario).count(), 1)

    def test_adicionar_item_incrementa_a_mesma_variante(self):
        carrinho = self.repository.buscar_ou_criar(str(self.usuario.pk))

        self.repository.adicionar_item(carrinho.id, str(self.variante.pk), 1)
        item = self.repository.adicionar_item(carrinho.id, str(self.variante.pk), 2)

        self.assertEqual(item.quantidade, 3)
        self.assertEqual(item.variante.preco_em_centavos, 7990)
        self.assertEqual(ItemCarrinhoModel.objects.count(), 1)

    def test_buscar_item_carrega_o_carrinho(self):
        carrinho = self.repository.buscar_ou_criar(str(self.usuario.pk))
        item = self.repository.adicionar_item(carrinho.id, str(self.variante.pk), 1)

        encontrado = self.repository.buscar_item(item.id)

        self.assertEqual(encontrado.carrinho.usuario_id, str(self.usuario.pk))
        self.assertEqual(encontrado.variante.produto.nome, 'Camiseta Básica')

    def test_diminuir_quantidade_acima_de_um(self):
        carrinho = self.repository.buscar_ou_criar(str(self.usuario.pk))
        item = self.repository.adicionar_item(carrinho.id, str(self.variante.pk), 3)

        nova_quantidade = self.repository.diminuir_quantidade(item.id, str(self.usuario.pk))

        self.assertEqual(nova_quantidade, 2)
        self.assertEqual(ItemCarrinhoModel.objects.get(pk=item.id).quantidade, 2)

    def test_diminuir_quantidade_um_remove_o_item(self):
        carrinho = self.repository.buscar_ou_criar(str(self.usuario.pk))
        item = self.repository.adicionar_item(carrinho.id, str(self.variante.pk), 1)

        nova_quantidade = self.repository.diminuir_quantidade(item.id, str(self.usuario.pk))

        self.assertEqual(nova_quantidade, 0)
        self.assertFalse(ItemCarrinhoModel.objects.filter(pk=item.id).exists())

    def test_diminuir_ou_remover_item_de_outro_usuario_nao_altera_a_linha(self):
        carrinho = self.repository.buscar_ou_criar(str(self.usuario.pk))
        item = self.repository.adicionar_item(carrinho.id, str(self.variante.pk), 2)

        with self.assertRaises(ItemCarrinhoNaoEncontradoError):
            self.repository.diminuir_quantidade(item.id, str(self.outro.pk))
        with self.assertRaises(ItemCarrinhoNaoEncontradoError):
            self.repository.remover_item(item.id, str(self.outro.pk))

        self.assertEqual(ItemCarrinhoModel.objects.get(pk=item.id).quantidade, 2)

    def test_remover_duas_vezes(self):
        carrinho = self.repository.buscar_ou_criar(str(self.usuario.pk))
        item = self.repository.adicionar_item(carrinho.id, str(self.variante.pk), 1)

        self.repository.remover_item(item.id, str(self.usuario.pk))

        with self.assertRaises(ItemCarrinhoNaoEncontradoError):
            self.repository.remover_item(item.id, str(self.usuario.pk))

    def test_definir_endereco_entrega(self):
        carrinho = self.repository.buscar_ou_criar(str(self.usuario.pk))
        endereco = EnderecoEntregaRepositoryDjango().criar(endereco_entity(self.usuario.pk))

        atualizado = self.repository.definir_endereco_entrega(carrinho.id, endereco.id)

        self.assertEqual(atualizado.endereco_entrega_id, endereco.id)


class CatalogoRepositoryTestCase(TestCase):

    def setUp(self):
        self.repository = CatalogoRepositoryDjango()
        self.preta = criar_variante(nome='Preta')
        self.branca = criar_variante(nome='Branca')

    def test_listar_produtos_com_variantes(self):
        produtos = self.repository.listar_produtos()

        self.assertEqual(len(produtos), 1)
        self.assertCountEqual([v.nome for v in produtos[0].variantes], ['Preta', 'Branca'])
        self.assertEqual(produtos[0].categoria.nome, 'Camisetas')

    def test_buscar_variante_por_slug(self):
        variante = self.repository.buscar_variante_por_slug('camiseta-basica-preta')

        self.assertEqual(variante.id, str(self.preta.pk))
        self.assertEqual(variante.preco_formatado, 'R$ 79,90')
        self.assertIsNone(self.repository.buscar_variante_por_slug('nao-existe'))

    def test_listar_variantes_do_produto(self):
        variantes = self.repository.listar_variantes_do_produto(str(self.preta.produto_id))
        self.assertEqual(len(variantes), 2)


class ProvedorSessaoTestCase(TestCase):

    def setUp(self):
        self.provedor = ProvedorSessaoDjango()
        self.factory = RequestFactory()
        self.usuario = Usuario.objects.create_user(
            email='ana@example.com', password='senha-forte-123', first_name='Ana', last_name='Silva'
        )

    def test_requisicao_anonima_nao_tem_sessao(self):
        request = self.factory.get('/')
        request.user = AnonymousUser()

        self.assertIsNone(self.provedor.obter_sessao(request))

    def test_usuario_da_sessao_django(self):
        request = self.factory.get('/')
        request.user = self.usuario

        sessao = self.provedor.obter_sessao(request)

        self.assertEqual(sessao.usuario.id, str(self.usuario.pk))
        self.assertEqual(sessao.usuario.nome, 'Ana Silva')

    def test_token_bearer_valido(self):
        token = RefreshToken.for_user(self.usuario).access_token
        request = self.factory.get('/', HTTP_AUTHORIZATION=f'Bearer {token}')
        request.user = AnonymousUser()

        sessao = self.provedor.obter_sessao(request)

        self.assertEqual(sessao.usuario.email, 'ana@example.com')

    def test_token_bearer_invalido(self):
        request = self.factory.get('/', HTTP_AUTHORIZATION='Bearer token-invalido')
        request.user = AnonymousUser()

        self.assertIsNone(self.provedor.obter_sessao(request))


class ComandosTestCase(TestCase):

    def test_carregar_dados_iniciais_e_idempotente(self):
        call_command('carregar_dados_iniciais', stdout=StringIO())
        total = VarianteProduto.objects.count()
        call_command('carregar_dados_iniciais', stdout=StringIO())

        self.assertGreater(total, 0)
        self.assertEqual(VarianteProduto.objects.count(), total)

    def test_wait_for_db_banco_disponivel(self):
        saida = StringIO()
        call_command('wait_for_db', stdout=saida)
        self.assertIn('Banco de dados disponível!', saida.getvalue())

    @patch('vitrine.core.management.commands.wait_for_db.time.sleep')
    def test_wait_for_db_esgota_tentativas(self, sleep_mock):
        with patch('django.db.backends.base.base.BaseDatabaseWrapper.ensure_connection',
                   side_effect=OperationalError):
            with self.assertRaises(CommandError):
                call_command('wait_for_db', tentativas=3, intervalo=0, stdout=StringIO())

        self.assertEqual(sleep_mock.call_count, 3)
