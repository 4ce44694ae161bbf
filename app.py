import logging
from decimal import Decimal, InvalidOperation

from flask import Flask, render_template, redirect, url_for, flash, request, jsonify, abort
from flask_wtf import CSRFProtect

from config import Config
from exceptions import EntradaInvalida, EstoqueInsuficiente, ProdutoNaoEncontrado
from forms_type import ProdutoForm, VendaForm
from models import db, Produto
from repositories import SQLAlchemyProdutoRepository
from services import ProdutoService

app = Flask(__name__)
app.config.from_object(Config)

logging.basicConfig(
    level=app.config['LOG_LEVEL'],
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
)
app.logger.setLevel(app.config['LOG_LEVEL'])

db.init_app(app)
csrf = CSRFProtect(app)


def produto_service():
    """Serviço ligado à sessão do banco da requisição atual."""
    return ProdutoService(SQLAlchemyProdutoRepository(db.session))


def eh_api():
    return request.path.startswith('/api/')


@app.teardown_request
def descartar_alteracoes_pendentes(exc):
    # Só sobrevive à requisição o que o serviço confirmou numa transação
    db.session.rollback()


# =============== PÁGINAS HTML ===============

@app.route('/')
def index():
    return redirect(url_for('listar_produtos'))

@app.route('/produtos')
def listar_produtos():
    # Busca vazia mostra todos os produtos
    nome = request.args.get('nome', '')
    produtos = produto_service().buscar_por_nome(nome)
    return render_template('produtos/listar.html', produtos=produtos, nome=nome)

@app.route('/produtos/novo')
def novo_produto():
    form = ProdutoForm()
    return render_template('produtos/formulario.html', form=form)

@app.route('/produtos/salvar', methods=['POST'])
def salvar_produto():
    form = ProdutoForm()
    if not form.validate_on_submit():
        return render_template('produtos/formulario.html', form=form), 400

    service = produto_service()
    if form.id.data:
        # Edição: altera o produto persistido, preservando a data de cadastro
        produto = service.buscar_por_id(form.id.data)
        if produto is None:
            abort(404)
    else:
        produto = Produto()

    produto.nome = form.nome.data
    produto.descricao = form.descricao.data or ''
    produto.preco = form.preco.data
    produto.quantidade = form.quantidade.data

    try:
        service.salvar(produto)
    except EntradaInvalida as e:
        flash(str(e), 'danger')
        return render_template('produtos/formulario.html', form=form), 400

    flash('Produto salvo com sucesso!', 'success')
    # Post/Redirect/Get para evitar reenvio do formulário
    return redirect(url_for('listar_produtos'))

@app.route('/produtos/editar/<int:produto_id>')
def editar_produto(produto_id):
    produto = produto_service().buscar_por_id(produto_id)
    if produto is None:
        abort(404)
    form = ProdutoForm(obj=produto)
    return render_template('produtos/formulario.html', form=form, produto=produto)

@app.route('/produtos/excluir/<int:produto_id>', methods=['POST'])
def excluir_produto(produto_id):
    try:
        produto_service().deletar(produto_id)
        flash('Produto excluído com sucesso!', 'success')
    except ProdutoNaoEncontrado as e:
        flash(str(e), 'danger')
    return redirect(url_for('listar_produtos'))

@app.route('/produtos/vender/<int:produto_id>', methods=['GET', 'POST'])
def vender_produto(produto_id):
    service = produto_service()
    produto = service.buscar_por_id(produto_id)
    if produto is None:
        abort(404)

    form = VendaForm()
    if form.validate_on_submit():
        try:
            service.registrar_venda(produto_id, form.quantidade.data)
        except EstoqueInsuficiente as e:
            flash(str(e), 'danger')
            return render_template('produtos/vender.html', form=form, produto=produto), 409
        flash(f'Venda de {form.quantidade.data} unidade(s) registrada com sucesso!', 'success')
        return redirect(url_for('listar_produtos'))
    return render_template('produtos/vender.html', form=form, produto=produto)


# =============== API JSON ===============

def _corpo_json():
    dados = request.get_json(silent=True)
    if not isinstance(dados, dict):
        raise EntradaInvalida('Corpo JSON inválido')
    return dados

def _inteiro(dados, campo):
    valor = dados.get(campo)
    if isinstance(valor, bool) or valor is None:
        raise EntradaInvalida(f"Campo '{campo}' deve ser um número inteiro")
    # 2.0 é aceito; 2.9 não é truncado
    if isinstance(valor, float) and not valor.is_integer():
        raise EntradaInvalida(f"Campo '{campo}' deve ser um número inteiro")
    try:
        return int(valor)
    except (TypeError, ValueError):
        raise EntradaInvalida(f"Campo '{campo}' deve ser um número inteiro")

def _preencher_produto(produto, dados):
    """Copia os campos do JSON para o produto, convertendo preço para Decimal."""
    nome = dados.get('nome')
    if not isinstance(nome, str):
        raise EntradaInvalida("Campo 'nome' é obrigatório")
    descricao = dados.get('descricao') or ''
    if not isinstance(descricao, str):
        raise EntradaInvalida("Campo 'descricao' deve ser texto")
    preco = dados.get('preco')
    if preco is None or isinstance(preco, bool):
        raise EntradaInvalida("Campo 'preco' é obrigatório")
    try:
        preco = Decimal(str(preco))
    except InvalidOperation:
        raise EntradaInvalida("Campo 'preco' deve ser numérico")
    if not preco.is_finite():
        raise EntradaInvalida("Campo 'preco' deve ser um número finito")

    produto.nome = nome
    produto.descricao = descricao
    produto.preco = preco
    produto.quantidade = _inteiro(dados, 'quantidade')
    return produto

@app.route('/api/produtos', methods=['GET'])
def api_listar_produtos():
    produtos = produto_service().buscar_por_nome(request.args.get('nome'))
    return jsonify([p.para_dict() for p in produtos])

@app.route('/api/produtos/<int:produto_id>', methods=['GET'])
def api_buscar_produto(produto_id):
    produto = produto_service().buscar_por_id(produto_id)
    if produto is None:
        raise ProdutoNaoEncontrado('Produto não encontrado', produto_id)
    return jsonify(produto.para_dict())

@app.route('/api/produtos', methods=['POST'])
@csrf.exempt
def api_criar_produto():
    produto = _preencher_produto(Produto(), _corpo_json())
    produto = produto_service().salvar(produto)
    return jsonify(produto.para_dict()), 201

@app.route('/api/produtos/<int:produto_id>', methods=['PUT'])
@csrf.exempt
def api_atualizar_produto(produto_id):
    service = produto_service()
    produto = service.buscar_por_id(produto_id)
    if produto is None:
        raise ProdutoNaoEncontrado('Produto não encontrado', produto_id)
    _preencher_produto(produto, _corpo_json())
    produto = service.salvar(produto)
    return jsonify(produto.para_dict())

@app.route('/api/produtos/<int:produto_id>', methods=['DELETE'])
@csrf.exempt
def api_excluir_produto(produto_id):
    produto_service().deletar(produto_id)
    return '', 204

@app.route('/api/produtos/<int:produto_id>/venda', methods=['POST'])
@csrf.exempt
def api_registrar_venda(produto_id):
    quantidade = _inteiro(_corpo_json(), 'quantidade')
    produto = produto_service().registrar_venda(produto_id, quantidade)
    return jsonify(produto.para_dict())


# =============== TRATAMENTO DE ERROS ===============

@app.errorhandler(EntradaInvalida)
def entrada_invalida(e):
    app.logger.warning('Entrada inválida em %s: %s', request.path, e)
    if eh_api():
        return jsonify({'error': str(e)}), 400
    flash(str(e), 'danger')
    return redirect(url_for('listar_produtos'))

@app.errorhandler(ProdutoNaoEncontrado)
def produto_nao_encontrado(e):
    if eh_api():
        return jsonify({'error': str(e)}), 404
    return render_template('erro.html', codigo=404, mensagem=str(e)), 404

@app.errorhandler(EstoqueInsuficiente)
def estoque_insuficiente(e):
    if eh_api():
        return jsonify({'error': str(e), 'disponivel': e.disponivel}), 409
    flash(str(e), 'danger')
    return redirect(url_for('listar_produtos'))

@app.errorhandler(404)
def pagina_nao_encontrada(e):
    if eh_api():
        return jsonify({'error': 'Recurso não encontrado'}), 404
    return render_template('erro.html', codigo=404, mensagem='Página não encontrada'), 404

@app.errorhandler(500)
def erro_interno(e):
    app.logger.error('Erro interno em %s: %s', request.path, e)
    if eh_api():
        return jsonify({'error': 'Erro interno do servidor'}), 500
    return render_template('erro.html', codigo=500, mensagem='Erro interno do servidor'), 500


if __name__ == '__main__':
    with app.app_context():
        db.create_all()
    app.run(debug=True)
