# Serviços com as regras de negócio
from .produto_service import ProdutoService
