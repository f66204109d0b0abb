from django import template

from vitrine.core.entities import formatar_centavos_brl

register = template.Library()


@register.filter(name='brl')
def brl(centavos):
    """Formata um valor em centavos como moeda brasileira. Ex: {{ 12990|brl }} -> R$ 129,90"""
    if centavos in (None, ''):
        return ''
    return formatar_centavos_brl(int(centavos))
