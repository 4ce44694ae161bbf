"""
Script simples para criar as tabelas do banco de dados
Uso: python criar_tabelas.py
"""
from sqlalchemy import inspect

from app import app, db


def criar_tabelas():
    with app.app_context():
        db.create_all()
        print("Tabelas criadas em", app.config['SQLALCHEMY_DATABASE_URI'])

        # Verificar se a tabela de produtos foi criada
        tabelas = inspect(db.engine).get_table_names()
        if 'produtos' in tabelas:
            print("Tabela 'produtos' confirmada no banco de dados")
            return True
        print("Erro: tabela 'produtos' não foi criada")
        return False


if __name__ == '__main__':
    raise SystemExit(0 if criar_tabelas() else 1)
