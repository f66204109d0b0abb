from django.core.management.base import BaseCommand
from vitrine.catalog.models import Categoria, Produto, VarianteProduto


class Command(BaseCommand):
    help = 'Carrega um catálogo inicial (categorias, produtos e variantes) para teste do site'

    # Preços em centavos
    PRODUTOS = {
        'Camisetas': [
            ('Camiseta Básica', 'Camiseta de algodão com modelagem reta', [
                ('Preta', 'preto', 7990),
                ('Branca', 'branco', 7990),
                ('Azul Marinho', 'azul', 8490),
            ]),
            ('Camiseta Oversized', 'Camiseta ampla em malha encorpada', [
                ('Off White', 'branco', 12990),
                ('Verde Oliva', 'verde', 12990),
            ]),
        ],
        'Calças': [
            ('Calça Jeans Slim', 'Calça jeans com elastano', [
                ('Azul Claro', 'azul', 18990),
                ('Azul Escuro', 'azul', 18990),
            ]),
        ],
        'Tênis': [
            ('Tênis Casual', 'Tênis de lona com solado de borracha', [
                ('Branco', 'branco', 24990),
                ('Preto', 'preto', 24990),
            ]),
        ],
    }

    def handle(self, *args, **kwargs):
        self.stdout.write('Criando dados iniciais...')

        for cat_nome, produtos in self.PRODUTOS.items():
            categoria, created = Categoria.objects.get_or_create(nome=cat_nome)
            if created:
                self.stdout.write(self.style.SUCCESS(f'Criada categoria "{categoria.nome}"'))

            for nome, descricao, variantes in produtos:
                produto, created = Produto.objects.get_or_create(
                    nome=nome,
                    defaults={'descricao': descricao, 'categoria': categoria},
                )
                if created:
                    self.stdout.write(self.style.SUCCESS(f'Criado produto "{produto.nome}"'))

                for var_nome, cor, preco in variantes:
                    VarianteProduto.objects.get_or_create(
                        produto=produto,
                        nome=var_nome,
                        defaults={'cor': cor, 'preco_em_centavos': preco},
                    )

        self.stdout.write(self.style.SUCCESS('Dados iniciais carregados com sucesso!'))
