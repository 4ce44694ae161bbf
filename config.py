# Configurações da aplicação, lidas das variáveis de ambiente
import os


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-key')  # Chave para sessões e CSRF
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///estoque.db')  # Banco de dados
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')  # Nível de log da aplicação
    WTF_CSRF_ENABLED = os.getenv('WTF_CSRF_ENABLED', '1') not in ('0', 'false', 'False')
