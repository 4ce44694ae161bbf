"""Repositório de produtos.

ProdutoRepository define o contrato de persistência usado pelo serviço;
SQLAlchemyProdutoRepository o implementa sobre uma sessão do SQLAlchemy
(db.session dentro da aplicação Flask).
"""
import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager

from models import Produto

logger = logging.getLogger(__name__)


class ProdutoRepository(ABC):
    """Contrato de persistência de produtos."""

    @abstractmethod
    def find_all(self):
        """Todos os produtos, em ordem de cadastro."""

    @abstractmethod
    def find_by_id(self, produto_id):
        """Produto com o ID informado, ou None."""

    @abstractmethod
    def find_by_nome_containing_ignore_case(self, trecho):
        """Produtos cujo nome contém `trecho`, sem diferenciar maiúsculas de minúsculas."""

    @abstractmethod
    def save(self, produto):
        """INSERT se o produto ainda não tem ID, UPDATE completo caso contrário."""

    @abstractmethod
    def exists_by_id(self, produto_id):
        """True se existe produto com o ID informado."""

    @abstractmethod
    def delete_by_id(self, produto_id):
        """Remove o produto; não faz nada se ele não existir."""

    @abstractmethod
    def transacao(self):
        """Context manager de uma unidade de trabalho: commit no sucesso, rollback em erro."""


class SQLAlchemyProdutoRepository(ProdutoRepository):

    def __init__(self, session):
        self.session = session

    def find_all(self):
        return self.session.query(Produto).order_by(Produto.id).all()

    def find_by_id(self, produto_id):
        return self.session.get(Produto, produto_id)

    def find_by_nome_containing_ignore_case(self, trecho):
        # Curingas digitados pelo usuário são tratados como texto literal
        literal = trecho.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
        return (
            self.session.query(Produto)
            .filter(Produto.nome.ilike(f'%{literal}%', escape='\\'))
            .order_by(Produto.id)
            .all()
        )

    def save(self, produto):
        produto = self.session.merge(produto) if produto.id is not None else produto
        self.session.add(produto)
        self.session.flush()  # Preenche o ID gerado pelo banco
        return produto

    def exists_by_id(self, produto_id):
        return self.session.query(Produto.id).filter_by(id=produto_id).first() is not None

    def delete_by_id(self, produto_id):
        self.session.query(Produto).filter_by(id=produto_id).delete(synchronize_session='fetch')

    @contextmanager
    def transacao(self):
        try:
            yield self.session
            self.session.commit()
        except Exception as e:
            self.session.rollback()
            logger.warning('Transação desfeita (%s)', type(e).__name__)
            raise
