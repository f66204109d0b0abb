# Define os modelos do banco de dados para a camada de infraestrutura (autenticação e endereços).

import uuid

from django.db import models
from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.conf import settings

# ====================================================================
# GERENCIADOR DE USUÁRIOS PERSONALIZADO (Para usar email como login)
# ====================================================================

class CustomUserManager(BaseUserManager):
    """
    Gerenciador de modelos de usuário onde o email é o identificador único
    para autenticação, em vez dos nomes de usuário.
    """
    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('O e-mail deve ser definido')
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Cria e salva um Superusuário com o e-mail e senha fornecidos.
        """
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('is_active', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True.')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True.')

        return self.create_user(email, password, **extra_fields)


# ====================================================================
# MODELO DE USUÁRIO
# ====================================================================

class Usuario(AbstractUser):
    """
    Modelo de Usuário Personalizado que utiliza o campo 'email' como identificador
    principal para login, em vez de 'username'.
    """
    username = None

    email = models.EmailField('Endereço de E-mail', unique=True)
    telefone = models.CharField(max_length=15, blank=True, null=True)

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = ['first_name', 'last_name']

    objects = CustomUserManager()

    class Meta:
        verbose_name = 'Usuário'
        verbose_name_plural = 'Usuários'
        db_table = 'infra_usuario'

    def __str__(self):
        return self.email


# ====================================================================
# ENDEREÇO DE ENTREGA
# ====================================================================

class EnderecoEntrega(models.Model):
    """
    Endereço de entrega cadastrado pelo usuário durante a identificação do carrinho.
    Não há edição nem exclusão: cada cadastro cria uma nova linha.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='enderecos_entrega',
        verbose_name="Usuário",
    )
    nome_destinatario = models.CharField(max_length=255, verbose_name="Destinatário")
    rua = models.CharField(max_length=255, verbose_name="Rua")
    numero = models.CharField(max_length=20, verbose_name="Número")
    complemento = models.CharField(max_length=100, blank=True, null=True, verbose_name="Complemento")
    bairro = models.CharField(max_length=100, verbose_name="Bairro")
    cidade = models.CharField(max_length=100, verbose_name="Cidade")
    estado = models.CharField(max_length=50, verbose_name="Estado")
    cep = models.CharField(max_length=8, verbose_name="CEP")
    pais = models.CharField(max_length=50, default='Brasil', verbose_name="País")
    telefone = models.CharField(max_length=11, verbose_name="Telefone")
    email = models.EmailField(verbose_name="E-mail")
    cpf_ou_cnpj = models.CharField(max_length=14, verbose_name="CPF/CNPJ")
    data_criacao = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = 'Endereço de Entrega'
        verbose_name_plural = 'Endereços de Entrega'
        db_table = 'endereco_entrega'
        ordering = ['data_criacao']

    def __str__(self):
        return f"{self.nome_destinatario} - {self.rua}, {self.numero}"

    def formatar_endereco_texto(self):
        """Retorna o endereço completo como string."""
        complemento_str = f", {self.complemento}" if self.complemento else ""
        return f"{self.rua}, {self.numero}{complemento_str} - {self.bairro} - {self.cidade}/{self.estado} - CEP: {self.cep}"
