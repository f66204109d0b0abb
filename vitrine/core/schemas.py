# vitrine/core/schemas.py
"""
Esquemas de validação das ações da loja.

Cada esquema descreve o formato exigido dos dados de entrada. Os casos de uso
chamam `validar` antes de tocar no banco: qualquer regra violada interrompe a
ação com DadosInvalidosError contendo as mensagens por campo.
"""
import re
from typing import Any, Dict, Mapping, Optional, Type

from django import forms

from vitrine.core.exceptions import DadosInvalidosError


def somente_digitos(valor: str) -> str:
    return re.sub(r"\D", "", valor or "")


def _obrigatorio(mensagem: str) -> Dict[str, str]:
    return {"required": mensagem}


class CriarEnderecoEntregaSchema(forms.Form):
    """Dados do formulário de novo endereço de entrega."""
    email = forms.EmailField(error_messages={"required": "Email inválido", "invalid": "Email inválido"})
    primeiro_nome = forms.CharField(max_length=100, error_messages=_obrigatorio("Nome é obrigatório"))
    sobrenome = forms.CharField(max_length=150, error_messages=_obrigatorio("Sobrenome é obrigatório"))
    cpf_cnpj = forms.CharField(max_length=18, error_messages=_obrigatorio("CPF/CNPJ é obrigatório"))
    telefone = forms.CharField(max_length=20, error_messages=_obrigatorio("Celular é obrigatório"))
    cep = forms.CharField(max_length=9, error_messages=_obrigatorio("CEP é obrigatório"))
    endereco = forms.CharField(max_length=255, error_messages=_obrigatorio("Endereço é obrigatório"))
    numero = forms.CharField(max_length=20, error_messages=_obrigatorio("Número é obrigatório"))
    complemento = forms.CharField(max_length=100, required=False)
    bairro = forms.CharField(max_length=100, error_messages=_obrigatorio("Bairro é obrigatório"))
    cidade = forms.CharField(max_length=100, error_messages=_obrigatorio("Cidade é obrigatória"))
    estado = forms.CharField(
        max_length=50,
        min_length=2,
        error_messages={"required": "Estado é obrigatório", "min_length": "Estado é obrigatório"},
    )

    def clean_cpf_cnpj(self):
        digitos = somente_digitos(self.cleaned_data["cpf_cnpj"])
        if len(digitos) not in (11, 14):
            raise forms.ValidationError("CPF deve ter 11 dígitos ou CNPJ deve ter 14 dígitos")
        return digitos

    def clean_telefone(self):
        digitos = somente_digitos(self.cleaned_data["telefone"])
        if len(digitos) not in (10, 11):
            raise forms.ValidationError("Celular deve ter 10 ou 11 dígitos")
        return digitos

    def clean_cep(self):
        digitos = somente_digitos(self.cleaned_data["cep"])
        if len(digitos) != 8:
            raise forms.ValidationError("CEP deve ter 8 dígitos")
        return digitos


class ItemCarrinhoSchema(forms.Form):
    item_carrinho_id = forms.UUIDField(
        error_messages={"required": "ID do item é obrigatório", "invalid": "ID do item inválido"}
    )


class AtualizarEnderecoCarrinhoSchema(forms.Form):
    endereco_entrega_id = forms.UUIDField(
        error_messages={"required": "ID do endereço é obrigatório", "invalid": "ID do endereço inválido"}
    )


class AdicionarProdutoSchema(forms.Form):
    variante_id = forms.UUIDField(
        error_messages={"required": "ID da variante é obrigatório", "invalid": "ID da variante inválido"}
    )
    quantidade = forms.IntegerField(
        min_value=1,
        required=False,
        error_messages={"min_value": "A quantidade deve ser pelo menos 1."},
    )

    def clean_quantidade(self):
        return self.cleaned_data.get("quantidade") or 1


def validar(schema: Type[forms.Form], dados: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Valida `dados` com o esquema e retorna os valores normalizados."""
    form = schema(data=dados or {})
    if not form.is_valid():
        erros = {campo: list(mensagens) for campo, mensagens in form.errors.items()}
        raise DadosInvalidosError(erros=erros)
    return form.cleaned_data
