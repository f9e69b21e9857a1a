# api/application/dtos/avaliacao_dto.py
from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from api.domain.avaliacao.resultado import ResultadoAvaliacao
from api.domain.plano_acao.entities import AcaoPlano
from api.domain.plano_acao.enums import Prazo


class PontuacaoCategoriaDTO(BaseModel):
    pontos: float
    maximo: float
    percentual: float
    nivel: str


class ResultadoDTO(BaseModel):
    pontuacao_total: float
    pontuacao_maxima: float
    percentual: float
    nivel: str
    categorias: dict[str, PontuacaoCategoriaDTO]

    @classmethod
    def from_domain(cls, resultado: ResultadoAvaliacao) -> ResultadoDTO:
        return cls(
            pontuacao_total=resultado.pontuacao_total,
            pontuacao_maxima=resultado.pontuacao_maxima,
            percentual=resultado.percentual,
            nivel=resultado.nivel.value,
            categorias={
                cat_id: PontuacaoCategoriaDTO(
                    pontos=p.pontos,
                    maximo=p.maximo,
                    percentual=p.percentual,
                    nivel=p.nivel.value,
                )
                for cat_id, p in resultado.categorias.items()
            },
        )


class AcaoPlanoDTO(BaseModel):
    titulo: str
    descricao: str
    prazo: str
    prazo_descricao: str
    responsavel: str
    impacto: str
    prioridade: str
    categoria: str

    @classmethod
    def from_domain(cls, acao: AcaoPlano) -> AcaoPlanoDTO:
        return cls(
            titulo=acao.titulo,
            descricao=acao.descricao,
            prazo=acao.prazo.value,
            prazo_descricao=acao.prazo_descricao,
            responsavel=acao.responsavel,
            impacto=acao.impacto,
            prioridade=acao.prioridade.value,
            categoria=acao.categoria,
        )


def plano_por_prazo_dto(grupos: dict[Prazo, list[AcaoPlano]]) -> dict[str, list[AcaoPlanoDTO]]:
    return {prazo.value: [AcaoPlanoDTO.from_domain(a) for a in acoes] for prazo, acoes in grupos.items()}


def plano_dto(acoes: Iterable[AcaoPlano]) -> list[AcaoPlanoDTO]:
    return [AcaoPlanoDTO.from_domain(a) for a in acoes]


class AvaliacaoRequestDTO(BaseModel):
    # Valores fora de YES/PARTIAL/NO/NA sao aceitos e tratados como nao respondidos.
    respostas: dict[str, str]


class AvaliacaoDTO(BaseModel):
    respondidas: int
    total_perguntas: int
    resultado: ResultadoDTO
    plano: list[AcaoPlanoDTO]
