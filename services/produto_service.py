"""Regras de negócio do estoque de produtos.

O serviço recebe o repositório no construtor e é a única camada que valida
produtos e altera o estoque. As rotas nunca acessam o repositório direto.
"""
import logging

from exceptions import EntradaInvalida, EstoqueInsuficiente, ProdutoNaoEncontrado

logger = logging.getLogger(__name__)


class ProdutoService:

    def __init__(self, repositorio):
        self.repositorio = repositorio

    def listar_todos(self):
        return self.repositorio.find_all()

    def buscar_por_id(self, produto_id):
        """Produto com o ID informado, ou None se não existir."""
        return self.repositorio.find_by_id(produto_id)

    def buscar_por_nome(self, nome):
        """Busca por trecho do nome; consulta vazia devolve todos os produtos."""
        if nome is None or not nome.strip():
            return self.listar_todos()
        return self.repositorio.find_by_nome_containing_ignore_case(nome)

    def salvar(self, produto):
        """Valida e persiste o produto (INSERT ou UPDATE).

        A validação acontece antes de qualquer gravação e dentro da transação:
        se falhar, o rollback descarta as alterações feitas num produto já
        persistido e ele volta aos valores do banco.
        """
        with self.repositorio.transacao():
            self._validar(produto)
            salvo = self.repositorio.save(produto)
        logger.info('Produto salvo: id=%s nome=%r', salvo.id, salvo.nome)
        return salvo

    def deletar(self, produto_id):
        with self.repositorio.transacao():
            if not self.repositorio.exists_by_id(produto_id):
                logger.warning('Exclusão de produto inexistente: id=%s', produto_id)
                raise ProdutoNaoEncontrado(f'Produto não encontrado com ID: {produto_id}', produto_id)
            self.repositorio.delete_by_id(produto_id)
        logger.info('Produto excluído: id=%s', produto_id)

    def registrar_venda(self, produto_id, quantidade_vendida):
        """Baixa `quantidade_vendida` unidades do estoque do produto.

        Leitura, verificação e gravação acontecem na mesma transação; se
        qualquer passo falhar nada é gravado.
        """
        with self.repositorio.transacao():
            produto = self.repositorio.find_by_id(produto_id)
            if produto is None:
                logger.warning('Venda de produto inexistente: id=%s', produto_id)
                raise ProdutoNaoEncontrado('Produto não encontrado', produto_id)

            if quantidade_vendida < 0:
                raise EntradaInvalida('Quantidade vendida não pode ser negativa')

            if quantidade_vendida > produto.quantidade:
                logger.warning(
                    'Estoque insuficiente: id=%s disponivel=%s solicitado=%s',
                    produto_id, produto.quantidade, quantidade_vendida,
                )
                raise EstoqueInsuficiente(produto.quantidade, quantidade_vendida)

            produto.quantidade -= quantidade_vendida
            # Mesma validação do salvar; não falha aqui porque a subtração foi checada acima
            self._validar(produto)
            produto = self.repositorio.save(produto)

        logger.info('Venda registrada: id=%s quantidade=%s restante=%s',
                    produto_id, quantidade_vendida, produto.quantidade)
        return produto

    def _validar(self, produto):
        if produto.preco is not None and not produto.preco.is_finite():
            logger.warning('Produto rejeitado: preço não finito (%s)', produto.preco)
            raise EntradaInvalida('Preço deve ser um número finito')
        if produto.preco is not None and produto.preco < 0:
            logger.warning('Produto rejeitado: preço negativo (%s)', produto.preco)
            raise EntradaInvalida('Preço não pode ser negativo')
        if produto.quantidade is not None and produto.quantidade < 0:
            logger.warning('Produto rejeitado: quantidade negativa (%s)', produto.quantidade)
            raise EntradaInvalida('Quantidade não pode ser negativa')

        if produto.preco is None:
            raise EntradaInvalida('Preço é obrigatório')
        if produto.quantidade is None:
            raise EntradaInvalida('Quantidade é obrigatória')
        if not produto.nome or not produto.nome.strip():
            raise EntradaInvalida('Nome é obrigatório')
        if produto.descricao is None:
            produto.descricao = ''
