# api/application/dtos/catalogo_dto.py
from __future__ import annotations

from pydantic import BaseModel

from api.domain.questionario.entities import Catalogo


class PerguntaDTO(BaseModel):
    id: str
    texto: str


class CategoriaDTO(BaseModel):
    id: str
    titulo: str
    perguntas: list[PerguntaDTO]


class CatalogoDTO(BaseModel):
    total_perguntas: int
    categorias: list[CategoriaDTO]

    @classmethod
    def from_domain(cls, catalogo: Catalogo) -> CatalogoDTO:
        return cls(
            total_perguntas=catalogo.total_perguntas,
            categorias=[
                CategoriaDTO(
                    id=c.id,
                    titulo=c.titulo,
                    perguntas=[PerguntaDTO(id=p.id, texto=p.texto) for p in c.perguntas],
                )
                for c in catalogo
            ],
        )
