import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Categoria',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('nome', models.CharField(max_length=100, unique=True, verbose_name='Nome da Categoria')),
                ('slug', models.SlugField(editable=False, max_length=100, unique=True)),
                ('data_criacao', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Categoria',
                'verbose_name_plural': 'Categorias',
                'db_table': 'catalogo_categoria',
                'ordering': ['nome'],
            },
        ),
        migrations.CreateModel(
            name='Produto',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('nome', models.CharField(max_length=255, verbose_name='Nome do Produto')),
                ('slug', models.SlugField(editable=False, max_length=255, unique=True)),
                ('descricao', models.TextField(blank=True, verbose_name='Descrição')),
                ('data_criacao', models.DateTimeField(auto_now_add=True)),
                ('categoria', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='produtos', to='catalog.categoria')),
            ],
            options={
                'verbose_name': 'Produto',
                'verbose_name_plural': 'Produtos',
                'db_table': 'catalogo_produto',
                'ordering': ['data_criacao'],
            },
        ),
        migrations.CreateModel(
            name='VarianteProduto',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('nome', models.CharField(max_length=255, verbose_name='Nome da Variante')),
                ('slug', models.SlugField(editable=False, max_length=255, unique=True)),
                ('cor', models.CharField(blank=True, max_length=50)),
                ('imagem_url', models.URLField(blank=True, max_length=500, verbose_name='Imagem')),
                ('preco_em_centavos', models.PositiveIntegerField(verbose_name='Preço (centavos)')),
                ('data_criacao', models.DateTimeField(auto_now_add=True)),
                ('produto', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='variantes', to='catalog.produto')),
            ],
            options={
                'verbose_name': 'Variante de Produto',
                'verbose_name_plural': 'Variantes de Produto',
                'db_table': 'catalogo_variante_produto',
                'ordering': ['data_criacao'],
            },
        ),
    ]
