# Modelo Produto: representa um item do estoque no sistema
from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import validates

from . import db


class Produto(db.Model):
    __tablename__ = 'produtos'  # Nome da tabela no banco de dados
    id = db.Column(db.Integer, primary_key=True)  # Gerado pelo banco no primeiro INSERT
    nome = db.Column(db.String(255), nullable=False)  # Nome do produto
    descricao = db.Column(db.String(255), nullable=False, default='')  # Descrição do produto
    preco = db.Column(db.Numeric(10, 2), nullable=False)  # Preço (Decimal, nunca float)
    quantidade = db.Column(db.Integer, nullable=False)  # Quantidade disponível em estoque
    data_cadastro = db.Column(db.DateTime, nullable=False, default=datetime.now)  # Data de cadastro

    def __init__(self, **kwargs):
        # A data de cadastro já existe no objeto transiente, antes do INSERT
        kwargs.setdefault('data_cadastro', datetime.now())
        super().__init__(**kwargs)

    @validates('preco')
    def _normalizar_preco(self, chave, valor):
        """Converte o preço para Decimal; floats passam por str() para não herdar erro binário."""
        if valor is None or isinstance(valor, Decimal):
            return valor
        if isinstance(valor, float):
            valor = str(valor)
        return Decimal(valor)

    def para_dict(self):
        """Representação serializável em JSON (usada pela API)."""
        return {
            'id': self.id,
            'nome': self.nome,
            'descricao': self.descricao,
            'preco': f'{self.preco:.2f}' if self.preco is not None else None,
            'quantidade': self.quantidade,
            'data_cadastro': self.data_cadastro.isoformat() if self.data_cadastro else None,
        }

    def __repr__(self):
        return f"<Produto id={self.id} nome='{self.nome}' preco={self.preco} quantidade={self.quantidade}>"
