"""Fixtures compartilhadas.

O banco é apontado para SQLite em memória antes de importar a aplicação,
já que a configuração é lida no import.
"""
import os

os.environ['DATABASE_URL'] = 'sqlite://'
os.environ['WTF_CSRF_ENABLED'] = '0'

from decimal import Decimal

import pytest

from app import app as flask_app
from models import db, Produto
from repositories import SQLAlchemyProdutoRepository
from services import ProdutoService


@pytest.fixture
def app():
    flask_app.config.update(TESTING=True, WTF_CSRF_ENABLED=False)
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def repositorio(app):
    return SQLAlchemyProdutoRepository(db.session)


@pytest.fixture
def service(repositorio):
    return ProdutoService(repositorio)


@pytest.fixture
def widget(service):
    """Produto já persistido para os testes que precisam de um registro."""
    return service.salvar(Produto(nome='Widget', descricao='basic widget',
                                  preco=Decimal('9.99'), quantidade=10))
