"""Testes das páginas HTML com o cliente de testes do Flask."""
from decimal import Decimal

from models import db, Produto


def _contar_produtos():
    return db.session.query(Produto).count()


def test_raiz_redireciona_para_lista(client):
    resposta = client.get('/')
    assert resposta.status_code == 302
    assert resposta.headers['Location'].endswith('/produtos')


def test_lista_vazia(client):
    resposta = client.get('/produtos')
    assert resposta.status_code == 200
    assert 'Nenhum produto encontrado.' in resposta.get_data(as_text=True)


def test_lista_mostra_produtos(client, widget):
    html = client.get('/produtos').get_data(as_text=True)
    assert 'Widget' in html
    assert 'R$ 9.99' in html


def test_busca_por_nome(client, service, widget):
    service.salvar(Produto(nome='Gadget', descricao='', preco=Decimal('1.00'), quantidade=1))
    html = client.get('/produtos?nome=WID').get_data(as_text=True)
    assert 'Widget' in html
    assert 'Gadget' not in html


def test_busca_em_branco_lista_todos(client, service, widget):
    service.salvar(Produto(nome='Gadget', descricao='', preco=Decimal('1.00'), quantidade=1))
    html = client.get('/produtos?nome=+++').get_data(as_text=True)
    assert 'Widget' in html
    assert 'Gadget' in html


def test_formulario_novo(client):
    resposta = client.get('/produtos/novo')
    assert resposta.status_code == 200
    assert 'Novo Produto' in resposta.get_data(as_text=True)


def test_salvar_novo_produto(client):
    resposta = client.post('/produtos/salvar', data={
        'nome': 'Lápis', 'descricao': 'HB', 'preco': '1.50', 'quantidade': '30',
    })
    assert resposta.status_code == 302
    produto = db.session.query(Produto).one()
    assert produto.nome == 'Lápis'
    assert produto.preco == Decimal('1.50')
    assert produto.quantidade == 30


def test_salvar_aceita_quantidade_zero(client):
    resposta = client.post('/produtos/salvar', data={
        'nome': 'Esgotado', 'descricao': '', 'preco': '0', 'quantidade': '0',
    })
    assert resposta.status_code == 302
    assert _contar_produtos() == 1


def test_salvar_preco_negativo_reexibe_formulario(client):
    resposta = client.post('/produtos/salvar', data={
        'nome': 'Lápis', 'descricao': '', 'preco': '-1', 'quantidade': '3',
    })
    assert resposta.status_code == 400
    assert _contar_produtos() == 0


def test_editar_mostra_formulario_preenchido(client, widget):
    resposta = client.get(f'/produtos/editar/{widget.id}')
    html = resposta.get_data(as_text=True)
    assert resposta.status_code == 200
    assert 'Editar Produto' in html
    assert 'value="Widget"' in html


def test_editar_inexistente(client):
    assert client.get('/produtos/editar/999').status_code == 404


def test_salvar_edicao_preserva_data_cadastro(client, widget):
    produto_id = widget.id
    data_cadastro = widget.data_cadastro
    resposta = client.post('/produtos/salvar', data={
        'id': str(produto_id), 'nome': 'Widget Pro', 'descricao': 'melhorado',
        'preco': '19.90', 'quantidade': '4',
    })
    assert resposta.status_code == 302
    produto = db.session.get(Produto, produto_id)
    assert produto.nome == 'Widget Pro'
    assert produto.quantidade == 4
    assert produto.data_cadastro == data_cadastro
    assert _contar_produtos() == 1


def test_excluir(client, widget):
    produto_id = widget.id
    resposta = client.post(f'/produtos/excluir/{produto_id}', follow_redirects=True)
    assert 'Produto excluído com sucesso!' in resposta.get_data(as_text=True)
    assert db.session.get(Produto, produto_id) is None


def test_excluir_inexistente(client):
    resposta = client.post('/produtos/excluir/999', follow_redirects=True)
    assert 'Produto não encontrado com ID: 999' in resposta.get_data(as_text=True)


def test_vender(client, widget):
    produto_id = widget.id
    resposta = client.post(f'/produtos/vender/{produto_id}', data={'quantidade': '3'})
    assert resposta.status_code == 302
    assert db.session.get(Produto, produto_id).quantidade == 7


def test_vender_mais_que_o_estoque(client, widget):
    produto_id = widget.id
    resposta = client.post(f'/produtos/vender/{produto_id}', data={'quantidade': '100'})
    assert resposta.status_code == 409
    assert 'Estoque insuficiente. Disponível: 10' in resposta.get_data(as_text=True)
    assert db.session.get(Produto, produto_id).quantidade == 10


def test_vender_produto_inexistente(client):
    assert client.get('/produtos/vender/999').status_code == 404
