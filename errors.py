# errors.py
"""
Erros do Movie Finder.

Todos carregam `user_message`: o texto que a interface mostra. Detalhes de
diagnóstico (URL, payload, exceção original) vão só para o log.
"""


class MovieFinderError(Exception):
    """Base: qualquer falha que vira mensagem na tela."""

    def __init__(self, user_message: str):
        super().__init__(user_message)
        self.user_message = user_message


class ValidationError(MovieFinderError):
    """Entrada do usuário rejeitada antes de qualquer chamada de rede."""


class TransportError(MovieFinderError):
    """Falha de rede, status HTTP de erro ou corpo que não é JSON utilizável."""


class RemoteError(MovieFinderError):
    """O serviço respondeu, mas com Response == "False" (ex: "Movie not found!")."""
