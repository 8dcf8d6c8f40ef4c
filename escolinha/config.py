# -*- coding: utf-8 -*-
"""
Configuração da aplicação, lida das variáveis de ambiente (com fallback para o .env).
"""
from starlette.config import Config
from starlette.datastructures import Secret

config = Config(".env")

ENVIRONMENT = config("ENVIRONMENT", default="development")

DATABASE_URL = config("DATABASE_URL", default="sqlite:///./escolinha.db")
# Render/Heroku ainda entregam o prefixo antigo
if DATABASE_URL.startswith("postgres://"):
    DATABASE_URL = DATABASE_URL.replace("postgres://", "postgresql://", 1)

SECRET_KEY = config("SECRET_KEY", cast=Secret, default="escola-secret-2024")
SESSION_MAX_AGE = config("SESSION_MAX_AGE", cast=int, default=7 * 24 * 60 * 60)

FRONTEND_URL = config("FRONTEND_URL", default="http://localhost:5000")

LOG_LEVEL = config("LOG_LEVEL", default="INFO")
LOG_FILE = config("LOG_FILE", default=None)

# Administrador criado na primeira inicialização
ADMIN_EMAIL = config("ADMIN_EMAIL", default="admin@escolinha.com")
ADMIN_PASSWORD = config("ADMIN_PASSWORD", cast=Secret, default="admin123")

# Armazenamento externo (Cloudflare R2 / S3) para fotos de alunos
S3_ENDPOINT_URL = config("S3_ENDPOINT_URL", default=None)
AWS_ACCESS_KEY_ID = config("AWS_ACCESS_KEY_ID", default=None)
AWS_SECRET_ACCESS_KEY = config("AWS_SECRET_ACCESS_KEY", cast=Secret, default=None)
S3_BUCKET_NAME = config("S3_BUCKET_NAME", default=None)
PUBLIC_BUCKET_URL = config("PUBLIC_BUCKET_URL", default=None)


def is_production() -> bool:
    return ENVIRONMENT == "production"


def storage_configured() -> bool:
    return all([S3_ENDPOINT_URL, AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, S3_BUCKET_NAME, PUBLIC_BUCKET_URL])
