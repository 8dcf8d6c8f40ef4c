# -*- coding: utf-8 -*-
"""
Rotas FastAPI para o catálogo de Uniformes.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from escolinha import auth
from escolinha.database import get_db
from escolinha.models.uniforme import Uniforme
from escolinha.schemas.uniforme import UniformeCreate, UniformeRead

router = APIRouter(
    prefix="/api/uniformes",
    tags=["Uniformes"],
)


@router.get("", response_model=List[UniformeRead])
def read_uniformes(db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    return db.query(Uniforme).filter(Uniforme.ativo == True).order_by(Uniforme.nome).all()  # noqa: E712


@router.post("", response_model=UniformeRead, status_code=status.HTTP_201_CREATED)
def create_uniforme(uniforme: UniformeCreate, db: Session = Depends(get_db), principal=Depends(auth.get_principal_equipe)):
    db_uniforme = Uniforme(**uniforme.dict())
    db.add(db_uniforme)
    db.commit()
    db.refresh(db_uniforme)
    return db_uniforme
