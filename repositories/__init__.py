# Repositórios de persistência
from .produto_repository import ProdutoRepository, SQLAlchemyProdutoRepository
