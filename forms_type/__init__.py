# Formulários da aplicação
from .produto_form import ProdutoForm
from .venda_form import VendaForm
