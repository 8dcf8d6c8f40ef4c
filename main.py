# -*- coding: utf-8 -*-
"""
Arquivo principal da aplicação FastAPI para a administração da escolinha de futebol.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

import create_first_admin
import escolinha.models  # noqa: F401
from escolinha import config
from escolinha.database import Base, engine
from escolinha.routes import (alunos_fastapi, auth_fastapi, dashboard_fastapi, eventos_fastapi,
                              filiais_fastapi, matriculas_fastapi, notificacoes_fastapi, pagamentos_fastapi,
                              planos_fastapi, portal_fastapi, professores_fastapi, turmas_fastapi,
                              uniformes_fastapi)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    filename=config.LOG_FILE
)
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

producao = config.is_production()

# Inicializa a aplicação FastAPI
app = FastAPI(
    title="API Escolinha de Futebol",
    description="API para administração de escolinhas de futebol com várias unidades",
    version="1.0.0",
    docs_url=None if producao else "/docs",
    redoc_url=None if producao else "/redoc",
    openapi_url=None if producao else "/openapi.json"
)

origins = [
    config.FRONTEND_URL,
    "http://localhost:5000",
    "http://localhost",
    "http://127.0.0.1",
]

app.add_middleware(
    SessionMiddleware,
    secret_key=str(config.SECRET_KEY),
    max_age=config.SESSION_MAX_AGE,
    https_only=producao,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        loc = [str(parte) for parte in error.get("loc", ()) if parte != "body"]
        errors.append({"campo": ".".join(loc), "mensagem": error.get("msg")})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Dados inválidos", "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Detalhes só no log, nunca na resposta
    logger.exception("Erro não tratado em %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Erro interno do servidor"},
    )


# Montagem dos routers
app.include_router(auth_fastapi.router)
app.include_router(filiais_fastapi.router)
app.include_router(alunos_fastapi.router)
app.include_router(professores_fastapi.router)
app.include_router(turmas_fastapi.router)
app.include_router(matriculas_fastapi.router)
app.include_router(pagamentos_fastapi.router)
app.include_router(planos_fastapi.router)
app.include_router(notificacoes_fastapi.router)
app.include_router(eventos_fastapi.router)
app.include_router(uniformes_fastapi.router)
app.include_router(portal_fastapi.router)
app.include_router(dashboard_fastapi.router)

create_first_admin.create_first_admin()


@app.get("/", tags=["Root"])
async def root():
    return {
        "mensagem": "API Escolinha de Futebol",
        "documentacao": None if producao else "/docs",
        "endpoints": [
            {"filiais": "/api/filiais"},
            {"alunos": "/api/alunos"},
            {"pagamentos": "/api/pagamentos"},
            {"planos": "/api/planos-financeiros"},
            {"notificacoes": "/api/notificacoes"},
            {"portal": "/api/portal"},
        ]
    }
