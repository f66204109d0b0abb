# vitrine/core/testes.py

import unittest
from unittest.mock import Mock

# Importamos as classes que queremos testar
from vitrine.core.entities import (
    Carrinho, EnderecoEntrega, EnderecoExibicao, ItemCarrinho, Resultado, Sessao, Usuario,
    VarianteProduto, formatar_centavos_brl,
)
from vitrine.core.exceptions import (
    AcessoNegadoError,
    DadosInvalidosError,
    EnderecoNaoEncontradoError,
    ErroPersistencia,
    ItemCarrinhoNaoEncontradoError,
    NaoAutenticadoError,
    VarianteNaoEncontradaError,
)
from vitrine.core.schemas import CriarEnderecoEntregaSchema, validar
from vitrine.core.use_cases import (
    AdicionarProdutoAoCarrinhoUseCase,
    AtualizarEnderecoEntregaCarrinhoUseCase,
    CriarEnderecoEntregaUseCase,
    DetalharVarianteUseCase,
    DiminuirQuantidadeItemCarrinhoUseCase,
    ListarEnderecosEntregaUseCase,
    ObterCarrinhoUseCase,
    RemoverItemCarrinhoUseCase,
)

ITEM_ID = '6f1c2b7e-8d4a-4c1e-9b0a-3e5f7a9c1d2b'
ENDERECO_ID = '0a1b2c3d-4e5f-4a6b-8c7d-9e0f1a2b3c4d'
VARIANTE_ID = '9e8d7c6b-5a4f-4e3d-8c2b-1a0f9e8d7c6b'


def dados_endereco(**extra):
    dados = {
        'email': 'ana@example.com',
        'primeiro_nome': 'Ana',
        'sobrenome': 'Silva',
        'cpf_cnpj': '123.456.789-01',
        'telefone': '(11) 98765-4321',
        'cep': '01001-000',
        'endereco': 'Praça da Sé',
        'numero': '100',
        'complemento': '',
        'bairro': 'Sé',
        'cidade': 'São Paulo',
        'estado': 'SP',
    }
    dados.update(extra)
    return dados


def sessao_de(usuario_id='1'):
    return Sessao(usuario=Usuario(id=usuario_id, email='ana@example.com'))


# ====================================================================
# ESQUEMAS DE VALIDAÇÃO
# ====================================================================

class TestCriarEnderecoEntregaSchema(unittest.TestCase):

    def test_dados_validos_sao_normalizados_para_digitos(self):
        campos = validar(CriarEnderecoEntregaSchema, dados_endereco())

        self.assertEqual(campos['cpf_cnpj'], '12345678901')
        self.assertEqual(campos['telefone'], '11987654321')
        self.assertEqual(campos['cep'], '01001000')

    def test_cnpj_com_14_digitos_e_aceito(self):
        campos = validar(CriarEnderecoEntregaSchema, dados_endereco(cpf_cnpj='12.345.678/0001-90'))
        self.assertEqual(campos['cpf_cnpj'], '12345678000190')

    def test_regras_de_tamanho_geram_mensagens_por_campo(self):
        dados = dados_endereco(cpf_cnpj='123', telefone='12345', cep='0100100', estado='S', email='ana')

        with self.assertRaises(DadosInvalidosError) as contexto:
            validar(CriarEnderecoEntregaSchema, dados)

        erros = contexto.exception.erros
        self.assertEqual(erros['cpf_cnpj'], ['CPF deve ter 11 dígitos ou CNPJ deve ter 14 dígitos'])
        self.assertEqual(erros['telefone'], ['Celular deve ter 10 ou 11 dígitos'])
        self.assertEqual(erros['cep'], ['CEP deve ter 8 dígitos'])
        self.assertEqual(erros['estado'], ['Estado é obrigatório'])
        self.assertEqual(erros['email'], ['Email inválido'])

    def test_campos_obrigatorios(self):
        dados = dados_endereco(primeiro_nome='', sobrenome='', endereco='', numero='', bairro='', cidade='')

        with self.assertRaises(DadosInvalidosError) as contexto:
            validar(CriarEnderecoEntregaSchema, dados)

        erros = contexto.exception.erros
        self.assertEqual(erros['primeiro_nome'], ['Nome é obrigatório'])
        self.assertEqual(erros['sobrenome'], ['Sobrenome é obrigatório'])
        self.assertEqual(erros['endereco'], ['Endereço é obrigatório'])
        self.assertEqual(erros['numero'], ['Número é obrigatório'])
        self.assertEqual(erros['bairro'], ['Bairro é obrigatório'])
        self.assertEqual(erros['cidade'], ['Cidade é obrigatória'])

    def test_telefone_com_10_digitos_e_aceito(self):
        campos = validar(CriarEnderecoEntregaSchema, dados_endereco(telefone='(11) 3333-4444'))
        self.assertEqual(campos['telefone'], '1133334444')


# ====================================================================
# ENTIDADES
# ====================================================================

class TestEntidades(unittest.TestCase):

    def test_formatar_centavos_brl(self):
        self.assertEqual(formatar_centavos_brl(12990), 'R$ 129,90')
        self.assertEqual(formatar_centavos_brl(123456), 'R$ 1.234,56')
        self.assertEqual(formatar_centavos_brl(0), 'R$ 0,00')

    def test_exibicao_separa_nome_no_primeiro_espaco(self):
        endereco = EnderecoEntrega(
            usuario_id='1', nome_destinatario='Ana Maria Silva', rua='Rua A', numero='1',
            bairro='Centro', cidade='Recife', estado='PE', cep='50000000',
            telefone='81999999999', email='ana@example.com', cpf_ou_cnpj='12345678901',
        )

        exibicao = EnderecoExibicao.de_endereco(endereco)

        self.assertEqual(exibicao.primeiro_nome, 'Ana')
        self.assertEqual(exibicao.sobrenome, 'Maria Silva')
        self.assertEqual(exibicao.complemento, '')
        self.assertEqual(exibicao.endereco, 'Rua A')

    def test_totais_do_carrinho(self):
        variante = VarianteProduto(produto_id='p', nome='Preta', slug='preta', preco_em_centavos=7990)
        carrinho = Carrinho(usuario_id='1', itens=[
            ItemCarrinho(carrinho_id='c', variante_id=variante.id, quantidade=2, variante=variante),
        ])

        self.assertEqual(carrinho.total_em_centavos, 15980)
        self.assertEqual(carrinho.quantidade_total, 2)
        self.assertEqual(carrinho.total_formatado, 'R$ 159,80')


# ====================================================================
# CASOS DE USO DE ENDEREÇO
# ====================================================================

class TestCriarEnderecoEntrega(unittest.TestCase):

    def setUp(self):
        """
        Prepara o caso de uso com um repositório "Mock" que devolve
        o próprio endereço recebido.
        """
        self.endereco_repo_mock = Mock()
        self.endereco_repo_mock.criar.side_effect = lambda endereco: endereco
        self.use_case = CriarEnderecoEntregaUseCase(endereco_repo=self.endereco_repo_mock)

    def test_criar_endereco_com_sucesso(self):
        """
        Cenário: o nome do destinatário é "primeiro_nome sobrenome" e o país é Brasil.
        """
        # ACT
        endereco = self.use_case.executar(sessao_de('7'), dados_endereco())

        # ASSERT
        self.assertEqual(endereco.nome_destinatario, 'Ana Silva')
        self.assertEqual(endereco.pais, 'Brasil')
        self.assertEqual(endereco.cep, '01001000')
        self.assertEqual(endereco.usuario_id, '7')
        self.assertIsNone(endereco.complemento)
        self.endereco_repo_mock.criar.assert_called_once()

    def test_complemento_informado_e_mantido(self):
        endereco = self.use_case.executar(sessao_de(), dados_endereco(complemento='Apto 12'))
        self.assertEqual(endereco.complemento, 'Apto 12')

    def test_sem_sessao_nada_e_gravado(self):
        with self.assertRaises(NaoAutenticadoError):
            self.use_case.executar(None, dados_endereco())

        self.endereco_repo_mock.criar.assert_not_called()

    def test_dados_invalidos_nao_tocam_o_repositorio(self):
        with self.assertRaises(DadosInvalidosError):
            self.use_case.executar(sessao_de(), dados_endereco(cep='123'))

        self.endereco_repo_mock.criar.assert_not_called()

    def test_erro_de_persistencia_e_propagado(self):
        self.endereco_repo_mock.criar.side_effect = ErroPersistencia()

        with self.assertRaises(ErroPersistencia):
            self.use_case.executar(sessao_de(), dados_endereco())


class TestListarEnderecosEntrega(unittest.TestCase):

    def setUp(self):
        self.endereco_repo_mock = Mock()
        self.use_case = ListarEnderecosEntregaUseCase(endereco_repo=self.endereco_repo_mock)

    def test_lista_vazia_e_sucesso(self):
        self.endereco_repo_mock.listar_por_usuario.return_value = []

        resultado = self.use_case.executar(sessao_de())

        self.assertEqual(resultado, Resultado(sucesso=True, dados=[]))

    def test_lista_projetada_para_exibicao(self):
        self.endereco_repo_mock.listar_por_usuario.return_value = [
            EnderecoEntrega(
                usuario_id='1', nome_destinatario='Ana Silva', rua='Praça da Sé', numero='100',
                bairro='Sé', cidade='São Paulo', estado='SP', cep='01001000',
                telefone='11987654321', email='ana@example.com', cpf_ou_cnpj='12345678901',
                id=ENDERECO_ID,
            )
        ]

        resultado = self.use_case.executar(sessao_de('1'))

        self.assertTrue(resultado.sucesso)
        self.assertEqual(resultado.dados[0].id, ENDERECO_ID)
        self.assertEqual(resultado.dados[0].primeiro_nome, 'Ana')
        self.assertEqual(resultado.dados[0].sobrenome, 'Silva')
        self.endereco_repo_mock.listar_por_usuario.assert_called_once_with('1')

    def test_sem_sessao_retorna_falha(self):
        resultado = self.use_case.executar(None)

        self.assertFalse(resultado.sucesso)
        self.assertEqual(resultado.erro, 'Usuário não autenticado.')
        self.endereco_repo_mock.listar_por_usuario.assert_not_called()

    def test_erro_de_leitura_vira_resultado_de_falha(self):
        self.endereco_repo_mock.listar_por_usuario.side_effect = ErroPersistencia()

        with self.assertLogs('vitrine.core.use_cases', level='ERROR'):
            resultado = self.use_case.executar(sessao_de())

        self.assertEqual(resultado, Resultado(sucesso=False, erro='Erro ao buscar endereços'))

    def test_erro_inesperado_tambem_vira_resultado_de_falha(self):
        """
        Cenário: uma falha fora da hierarquia da Core (ex: no mapeamento) não escapa da listagem.
        """
        self.endereco_repo_mock.listar_por_usuario.side_effect = AttributeError('campo ausente')

        with self.assertLogs('vitrine.core.use_cases', level='ERROR'):
            resultado = self.use_case.executar(sessao_de())

        self.assertEqual(resultado, Resultado(sucesso=False, erro='Erro ao buscar endereços'))


# ====================================================================
# CASOS DE USO DO CARRINHO
# ====================================================================

def item_do_usuario(usuario_id, quantidade=1):
    return ItemCarrinho(
        id=ITEM_ID,
        carrinho_id='carrinho-1',
        variante_id=VARIANTE_ID,
        quantidade=quantidade,
        carrinho=Carrinho(id='carrinho-1', usuario_id=usuario_id),
    )


class TestRemoverItemCarrinho(unittest.TestCase):

    def setUp(self):
        self.carrinho_repo_mock = Mock()
        self.use_case = RemoverItemCarrinhoUseCase(carrinho_repo=self.carrinho_repo_mock)

    def test_remover_item_com_sucesso(self):
        self.carrinho_repo_mock.buscar_item.return_value = item_do_usuario('1')

        self.use_case.executar(sessao_de('1'), {'item_carrinho_id': ITEM_ID})

        self.carrinho_repo_mock.remover_item.assert_called_once_with(ITEM_ID, '1')

    def test_item_de_outro_usuario_e_negado(self):
        """
        Cenário: o item pertence ao carrinho de outro usuário. Nada é removido.
        """
        self.carrinho_repo_mock.buscar_item.return_value = item_do_usuario('2')

        with self.assertRaises(AcessoNegadoError):
            self.use_case.executar(sessao_de('1'), {'item_carrinho_id': ITEM_ID})

        self.carrinho_repo_mock.remover_item.assert_not_called()

    def test_item_inexistente(self):
        self.carrinho_repo_mock.buscar_item.return_value = None

        with self.assertRaises(ItemCarrinhoNaoEncontradoError):
            self.use_case.executar(sessao_de('1'), {'item_carrinho_id': ITEM_ID})

    def test_sem_sessao(self):
        with self.assertRaises(NaoAutenticadoError):
            self.use_case.executar(None, {'item_carrinho_id': ITEM_ID})

        self.carrinho_repo_mock.buscar_item.assert_not_called()

    def test_id_invalido(self):
        with self.assertRaises(DadosInvalidosError) as contexto:
            self.use_case.executar(sessao_de('1'), {'item_carrinho_id': 'abc'})

        self.assertIn('item_carrinho_id', contexto.exception.erros)
        self.carrinho_repo_mock.buscar_item.assert_not_called()


class TestDiminuirQuantidadeItemCarrinho(unittest.TestCase):

    def setUp(self):
        self.carrinho_repo_mock = Mock()
        self.use_case = DiminuirQuantidadeItemCarrinhoUseCase(carrinho_repo=self.carrinho_repo_mock)

    def test_diminuir_retorna_nova_quantidade(self):
        self.carrinho_repo_mock.buscar_item.return_value = item_do_usuario('1', quantidade=3)
        self.carrinho_repo_mock.diminuir_quantidade.return_value = 2

        nova_quantidade = self.use_case.executar(sessao_de('1'), {'item_carrinho_id': ITEM_ID})

        self.assertEqual(nova_quantidade, 2)
        self.carrinho_repo_mock.diminuir_quantidade.assert_called_once_with(ITEM_ID, '1')

    def test_item_de_outro_usuario_e_negado(self):
        self.carrinho_repo_mock.buscar_item.return_value = item_do_usuario('2', quantidade=3)

        with self.assertRaises(AcessoNegadoError):
            self.use_case.executar(sessao_de('1'), {'item_carrinho_id': ITEM_ID})

        self.carrinho_repo_mock.diminuir_quantidade.assert_not_called()

    def test_item_removido_entre_a_busca_e_a_escrita(self):
        """
        Cenário: outra requisição removeu o item; o repositório reporta NotFound.
        """
        self.carrinho_repo_mock.buscar_item.return_value = item_do_usuario('1')
        self.carrinho_repo_mock.diminuir_quantidade.side_effect = ItemCarrinhoNaoEncontradoError()

        with self.assertRaises(ItemCarrinhoNaoEncontradoError):
            self.use_case.executar(sessao_de('1'), {'item_carrinho_id': ITEM_ID})


class TestAtualizarEnderecoEntregaCarrinho(unittest.TestCase):

    def setUp(self):
        self.carrinho_repo_mock = Mock()
        self.endereco_repo_mock = Mock()
        self.use_case = AtualizarEnderecoEntregaCarrinhoUseCase(
            carrinho_repo=self.carrinho_repo_mock,
            endereco_repo=self.endereco_repo_mock,
        )
        self.carrinho_repo_mock.buscar_ou_criar.return_value = Carrinho(id='carrinho-1', usuario_id='1')

    def endereco_de(self, usuario_id):
        return EnderecoEntrega(
            usuario_id=usuario_id, nome_destinatario='Ana Silva', rua='Rua A', numero='1',
            bairro='Centro', cidade='Recife', estado='PE', cep='50000000',
            telefone='81999999999', email='ana@example.com', cpf_ou_cnpj='12345678901',
            id=ENDERECO_ID,
        )

    def test_vincula_endereco_do_proprio_usuario(self):
        self.endereco_repo_mock.buscar_por_id.return_value = self.endereco_de('1')

        self.use_case.executar(sessao_de('1'), {'endereco_entrega_id': ENDERECO_ID})

        self.carrinho_repo_mock.definir_endereco_entrega.assert_called_once_with('carrinho-1', ENDERECO_ID)

    def test_endereco_de_outro_usuario_e_negado(self):
        self.endereco_repo_mock.buscar_por_id.return_value = self.endereco_de('2')

        with self.assertRaises(AcessoNegadoError):
            self.use_case.executar(sessao_de('1'), {'endereco_entrega_id': ENDERECO_ID})

        self.carrinho_repo_mock.definir_endereco_entrega.assert_not_called()

    def test_endereco_inexistente(self):
        self.endereco_repo_mock.buscar_por_id.return_value = None

        with self.assertRaises(EnderecoNaoEncontradoError):
            self.use_case.executar(sessao_de('1'), {'endereco_entrega_id': ENDERECO_ID})

    def test_sem_sessao(self):
        with self.assertRaises(NaoAutenticadoError):
            self.use_case.executar(None, {'endereco_entrega_id': ENDERECO_ID})

        self.endereco_repo_mock.buscar_por_id.assert_not_called()


class TestAdicionarProdutoAoCarrinho(unittest.TestCase):

    def setUp(self):
        self.carrinho_repo_mock = Mock()
        self.catalogo_repo_mock = Mock()
        self.use_case = AdicionarProdutoAoCarrinhoUseCase(
            carrinho_repo=self.carrinho_repo_mock,
            catalogo_repo=self.catalogo_repo_mock,
        )
        self.carrinho_repo_mock.buscar_ou_criar.return_value = Carrinho(id='carrinho-1', usuario_id='1')

    def test_quantidade_padrao_e_um(self):
        self.catalogo_repo_mock.buscar_variante_por_id.return_value = Mock()

        self.use_case.executar(sessao_de('1'), {'variante_id': VARIANTE_ID})

        self.carrinho_repo_mock.adicionar_item.assert_called_once_with('carrinho-1', VARIANTE_ID, 1)

    def test_variante_inexistente(self):
        self.catalogo_repo_mock.buscar_variante_por_id.return_value = None

        with self.assertRaises(VarianteNaoEncontradaError):
            self.use_case.executar(sessao_de('1'), {'variante_id': VARIANTE_ID, 'quantidade': 2})

        self.carrinho_repo_mock.adicionar_item.assert_not_called()

    def test_quantidade_zero_e_invalida(self):
        with self.assertRaises(DadosInvalidosError):
            self.use_case.executar(sessao_de('1'), {'variante_id': VARIANTE_ID, 'quantidade': 0})


class TestObterCarrinho(unittest.TestCase):

    def test_sem_carrinho_retorna_carrinho_vazio(self):
        carrinho_repo_mock = Mock()
        carrinho_repo_mock.buscar_por_usuario.return_value = None

        carrinho = ObterCarrinhoUseCase(carrinho_repo_mock).executar(sessao_de('1'))

        self.assertEqual(carrinho.usuario_id, '1')
        self.assertEqual(carrinho.itens, [])

    def test_sem_sessao(self):
        with self.assertRaises(NaoAutenticadoError):
            ObterCarrinhoUseCase(Mock()).executar(None)


class TestDetalharVariante(unittest.TestCase):

    def test_slug_inexistente(self):
        catalogo_repo_mock = Mock()
        catalogo_repo_mock.buscar_variante_por_slug.return_value = None

        with self.assertRaises(VarianteNaoEncontradaError):
            DetalharVarianteUseCase(catalogo_repo_mock).executar('nao-existe')


if __name__ == '__main__':
    unittest.main()
