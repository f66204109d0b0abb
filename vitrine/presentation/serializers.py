from rest_framework import serializers

# Os serializers trabalham sobre as Entidades da Core (dataclasses), não sobre
# os modelos do ORM: as views da API só conversam com os casos de uso.


class EnderecoEntregaSerializer(serializers.Serializer):
    """Endereço recém-criado, com as colunas persistidas."""
    id = serializers.CharField()
    usuario_id = serializers.CharField()
    nome_destinatario = serializers.CharField()
    rua = serializers.CharField()
    numero = serializers.CharField()
    complemento = serializers.CharField(allow_null=True)
    bairro = serializers.CharField()
    cidade = serializers.CharField()
    estado = serializers.CharField()
    cep = serializers.CharField()
    pais = serializers.CharField()
    telefone = serializers.CharField()
    email = serializers.EmailField()
    cpf_ou_cnpj = serializers.CharField()
    data_criacao = serializers.DateTimeField(allow_null=True)


class EnderecoExibicaoSerializer(serializers.Serializer):
    """Projeção usada na listagem (nome separado em primeiro nome e sobrenome)."""
    id = serializers.CharField()
    primeiro_nome = serializers.CharField()
    sobrenome = serializers.CharField()
    cpf_cnpj = serializers.CharField()
    telefone = serializers.CharField()
    cep = serializers.CharField()
    endereco = serializers.CharField()
    numero = serializers.CharField()
    complemento = serializers.CharField()
    bairro = serializers.CharField()
    cidade = serializers.CharField()
    estado = serializers.CharField()
    email = serializers.EmailField()


class ResultadoEnderecosSerializer(serializers.Serializer):
    """Resultado etiquetado da listagem de endereços."""
    sucesso = serializers.BooleanField()
    dados = EnderecoExibicaoSerializer(many=True, allow_null=True)
    erro = serializers.CharField(allow_null=True)


# ====================================================================
# SERIALIZERS PARA O CARRINHO
# ====================================================================

class ItemCarrinhoSerializer(serializers.Serializer):
    """
    Item do carrinho com os dados da variante achatados para a interface.
    """
    id = serializers.CharField()
    variante_id = serializers.CharField()
    quantidade = serializers.IntegerField()
    nome_produto = serializers.CharField(source='variante.produto.nome', default='')
    nome_variante = serializers.CharField(source='variante.nome', default='')
    imagem_url = serializers.CharField(source='variante.imagem_url', default='')
    preco_em_centavos = serializers.IntegerField(source='variante.preco_em_centavos', default=0)
    subtotal_em_centavos = serializers.IntegerField()


class CarrinhoSerializer(serializers.Serializer):
    """
    Serializer principal para o carrinho de compras.
    """
    id = serializers.CharField()
    usuario_id = serializers.CharField()
    endereco_entrega_id = serializers.CharField(allow_null=True)
    itens = ItemCarrinhoSerializer(many=True)
    quantidade_total = serializers.IntegerField()
    total_em_centavos = serializers.IntegerField()
    total_formatado = serializers.CharField()


class DiminuirItemCarrinhoSerializer(serializers.Serializer):
    """Nova quantidade do item; `removido` indica que a última unidade saiu do carrinho."""
    quantidade = serializers.IntegerField()
    removido = serializers.BooleanField()
