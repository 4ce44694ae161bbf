# Formulário de cadastro e edição de produtos
from flask_wtf import FlaskForm
from wtforms import StringField, DecimalField, IntegerField, SubmitField, TextAreaField
from wtforms.validators import DataRequired, InputRequired, Length, NumberRange, Optional
from wtforms.widgets import HiddenInput

class ProdutoForm(FlaskForm):
    id = IntegerField(widget=HiddenInput(), validators=[Optional()])  # Preenchido apenas na edição
    nome = StringField('Nome do Produto', validators=[DataRequired(), Length(max=255)])  # Nome do produto
    descricao = TextAreaField('Descrição', validators=[Length(max=255)])  # Descrição
    preco = DecimalField('Preço', places=2, validators=[InputRequired(), NumberRange(min=0)])  # Preço unitário
    quantidade = IntegerField('Quantidade em Estoque', validators=[InputRequired(), NumberRange(min=0)])  # Quantidade
    submit = SubmitField('Salvar')  # Botão de envio
