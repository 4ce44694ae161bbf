# Formulário para registrar a venda (baixa de estoque) de um produto
from flask_wtf import FlaskForm
from wtforms import IntegerField, SubmitField
from wtforms.validators import InputRequired, NumberRange

class VendaForm(FlaskForm):
    quantidade = IntegerField('Quantidade Vendida', validators=[InputRequired(), NumberRange(min=1)])  # Unidades vendidas
    submit = SubmitField('Registrar Venda')  # Botão de registro
