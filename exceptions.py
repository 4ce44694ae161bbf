"""Exceções de negócio do controle de estoque.

Todas derivam de EstoqueError para que as rotas possam tratá-las de forma
uniforme. Falhas do banco de dados (SQLAlchemyError) não são encapsuladas:
chegam ao chamador como foram levantadas.
"""


class EstoqueError(Exception):
    """Base para os erros de regra de negócio."""


class EntradaInvalida(EstoqueError, ValueError):
    """Um produto viola uma regra de valor (preço ou quantidade negativos)."""


class ProdutoNaoEncontrado(EstoqueError, LookupError):
    """Nenhum produto persistido com o ID informado."""

    def __init__(self, mensagem, produto_id=None):
        super().__init__(mensagem)
        self.produto_id = produto_id


class EstoqueInsuficiente(EstoqueError):
    """Venda maior que a quantidade disponível em estoque."""

    def __init__(self, disponivel, solicitado=None):
        super().__init__(f'Estoque insuficiente. Disponível: {disponivel}')
        self.disponivel = disponivel
        self.solicitado = solicitado
