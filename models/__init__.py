# Inicialização do SQLAlchemy e importação dos modelos do sistema
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()  # Instância global do banco de dados

# Importação dos modelos para registro no SQLAlchemy
from .produto import Produto
