# api/application/dtos/submissao_dto.py
from __future__ import annotations

from pydantic import BaseModel, Field

from api.domain.avaliacao.entities import Evidencia, Submissao

from .avaliacao_dto import AcaoPlanoDTO, ResultadoDTO


class RespondenteDTO(BaseModel):
    nome: str = Field(min_length=1, max_length=200)
    setor: str = Field(default="", max_length=200)


class EvidenciaEntradaDTO(BaseModel):
    pergunta_id: str
    comentario: str = ""
    arquivo_url: str | None = None
    arquivo_nome: str | None = None
    arquivo_tipo: str | None = None
    arquivo_tamanho: int | None = Field(default=None, ge=0)


class SubmissaoRequestDTO(BaseModel):
    respondente: RespondenteDTO
    respostas: dict[str, str]
    evidencias: list[EvidenciaEntradaDTO] = []


class EvidenciaDTO(BaseModel):
    pergunta_id: str
    comentario: str
    registrada_em: str
    arquivo_url: str | None
    arquivo_nome: str | None
    arquivo_tipo: str | None
    arquivo_tamanho: int | None

    @classmethod
    def from_domain(cls, evidencia: Evidencia) -> EvidenciaDTO:
        return cls(
            pergunta_id=evidencia.pergunta_id,
            comentario=evidencia.comentario,
            registrada_em=evidencia.registrada_em.isoformat(),
            arquivo_url=evidencia.arquivo_url,
            arquivo_nome=evidencia.arquivo_nome,
            arquivo_tipo=evidencia.arquivo_tipo,
            arquivo_tamanho=evidencia.arquivo_tamanho,
        )


class SubmissaoResumoDTO(BaseModel):
    id: str
    registrada_em: str
    nome: str
    setor: str
    percentual: float
    nivel: str

    @classmethod
    def from_domain(cls, submissao: Submissao) -> SubmissaoResumoDTO:
        return cls(
            id=str(submissao.id),
            registrada_em=submissao.registrada_em.isoformat(),
            nome=submissao.respondente.nome,
            setor=submissao.respondente.setor_exibicao,
            percentual=submissao.resultado.percentual,
            nivel=submissao.resultado.nivel.value,
        )


class SubmissaoDetalheDTO(BaseModel):
    id: str
    registrada_em: str
    respondente: RespondenteDTO
    respostas: dict[str, str]
    resultado: ResultadoDTO
    evidencias: list[EvidenciaDTO]
    plano_por_prazo: dict[str, list[AcaoPlanoDTO]]
