# vitrine/presentation/views_auth.py
"""
Views para autenticação e registro de usuários.
"""
import logging

from django.views import View
from django.shortcuts import render, redirect
from django.contrib.auth import authenticate, login, logout
from django.contrib import messages
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST

from .forms import LoginForm, RegistroForm

logger = logging.getLogger(__name__)


class CadastroUsuarioView(View):
    """
    View para a página de registro de usuário.
    """
    template_name = 'auth/cadastro.html'

    def get(self, request):
        form = RegistroForm()
        context = {'form': form}
        return render(request, self.template_name, context)

    def post(self, request):
        form = RegistroForm(request.POST)
        if form.is_valid():
            usuario = form.save()
            logger.info("Usuário %s cadastrado.", usuario.pk)
            messages.success(request, 'Cadastro realizado com sucesso! Faça login para continuar.')
            return redirect('login')

        context = {'form': form}
        return render(request, self.template_name, context)


class LoginView(View):
    """
    View para a página de login.
    """
    template_name = 'auth/login.html'

    def get(self, request):
        form = LoginForm()
        context = {'form': form, 'next': request.GET.get('next', '')}
        return render(request, self.template_name, context)

    def post(self, request):
        form = LoginForm(request.POST)
        destino = request.POST.get('next', '')
        if form.is_valid():
            email = form.cleaned_data.get('email')
            password = form.cleaned_data.get('password')
            user = authenticate(request, username=email, password=password)
            if user is not None:
                login(request, user)
                messages.success(request, f'Bem-vindo(a), {user.first_name or user.email}!')
                if destino and url_has_allowed_host_and_scheme(destino, allowed_hosts={request.get_host()}):
                    return redirect(destino)
                return redirect('home')
            messages.error(request, 'Email ou senha inválidos.')

        context = {'form': form, 'next': destino}
        return render(request, self.template_name, context)


@require_POST
def logout_usuario(request):
    """
    View para a saída do usuário.
    """
    if request.user.is_authenticated:
        messages.info(request, "Você saiu do sistema.")
    logout(request)
    return redirect('home')
