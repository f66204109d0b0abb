# vitrine/presentation/forms.py

from django import forms
from django.contrib.auth import get_user_model

from vitrine.core.schemas import AdicionarProdutoSchema, CriarEnderecoEntregaSchema

Usuario = get_user_model()

# --- 1. FORMULÁRIOS DE AUTENTICAÇÃO ---

class LoginForm(forms.Form):
    """
    Formulário de login por e-mail e senha.
    """
    email = forms.EmailField(
        label="E-mail",
        error_messages={"required": "Email inválido", "invalid": "Email inválido"},
        widget=forms.EmailInput(attrs={'placeholder': 'Digite seu email'})
    )
    password = forms.CharField(
        label="Senha",
        min_length=8,
        error_messages={"min_length": "Senha inválida", "required": "Senha inválida"},
        widget=forms.PasswordInput(attrs={'placeholder': 'Digite sua senha'})
    )


class RegistroForm(forms.ModelForm):
    """
    Formulário para registro de novos usuários.
    """
    password = forms.CharField(
        label="Senha",
        min_length=8,
        widget=forms.PasswordInput(attrs={'placeholder': 'Crie uma senha forte'})
    )
    password_confirm = forms.CharField(
        label="Confirme a Senha",
        widget=forms.PasswordInput(attrs={'placeholder': 'Digite a senha novamente'})
    )

    class Meta:
        model = Usuario
        fields = ('first_name', 'last_name', 'email')
        labels = {'first_name': 'Nome', 'last_name': 'Sobrenome', 'email': 'E-mail'}

    def clean_email(self):
        email = Usuario.objects.normalize_email(self.cleaned_data['email'])
        if Usuario.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("Este e-mail já está em uso.")
        return email

    def clean(self):
        # Validação para garantir que as senhas são iguais
        cleaned_data = super().clean()
        password = cleaned_data.get("password")
        password_confirm = cleaned_data.get("password_confirm")

        if password and password_confirm and password != password_confirm:
            self.add_error('password_confirm', "As senhas não coincidem.")

        return cleaned_data

    def save(self, commit=True):
        usuario = super().save(commit=False)
        usuario.set_password(self.cleaned_data['password'])
        if commit:
            usuario.save()
        return usuario


# --- 2. FORMULÁRIOS DA LOJA ---

class EnderecoEntregaForm(CriarEnderecoEntregaSchema):
    """
    Formulário de novo endereço. Reaproveita as regras do esquema de validação,
    acrescentando apenas os rótulos e placeholders da interface.
    """
    PLACEHOLDERS = {
        'email': 'Email',
        'primeiro_nome': 'Primeiro nome',
        'sobrenome': 'Sobrenome',
        'cpf_cnpj': 'CPF/CNPJ',
        'telefone': 'Celular',
        'cep': 'CEP',
        'endereco': 'Endereço',
        'numero': 'Número',
        'complemento': 'Complemento',
        'bairro': 'Bairro',
        'cidade': 'Cidade',
        'estado': 'Estado',
    }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for nome, campo in self.fields.items():
            campo.label = self.PLACEHOLDERS[nome]
            campo.widget.attrs.update({'placeholder': self.PLACEHOLDERS[nome], 'class': 'form-control'})


class AdicionarAoCarrinhoForm(AdicionarProdutoSchema):
    """
    Formulário para adicionar a variante exibida ao carrinho.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['variante_id'].widget = forms.HiddenInput()
        self.fields['quantidade'].initial = 1
        self.fields['quantidade'].widget.attrs.update({'class': 'form-control', 'min': '1', 'step': '1'})
