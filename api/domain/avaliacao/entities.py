# api/domain/avaliacao/entities.py
from __future__ import annotations

import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType

from .enums import Resposta
from .resultado import ResultadoAvaliacao

SETOR_NAO_INFORMADO = "Não informado"


@dataclass(frozen=True)
class Respondente:
    nome: str
    setor: str = ""

    def __post_init__(self) -> None:
        nome = self.nome.strip()
        if not nome:
            raise ValueError("Nome do respondente nao pode ser vazio")
        object.__setattr__(self, "nome", nome)
        object.__setattr__(self, "setor", self.setor.strip())

    @property
    def setor_exibicao(self) -> str:
        return self.setor or SETOR_NAO_INFORMADO


@dataclass(frozen=True)
class Evidencia:
    """Comentario e metadados de arquivo anexados a uma pergunta. O arquivo em si vive fora."""

    pergunta_id: str
    comentario: str
    registrada_em: datetime
    arquivo_url: str | None = None
    arquivo_nome: str | None = None
    arquivo_tipo: str | None = None
    arquivo_tamanho: int | None = None


@dataclass(frozen=True)
class Submissao:
    """Avaliacao finalizada. Respostas congeladas no envio; resultado calculado na construcao
    por quem cria a submissao (SubmissaoService), nunca atualizado parcialmente."""

    id: uuid.UUID
    registrada_em: datetime
    respondente: Respondente
    respostas: Mapping[str, Resposta]
    resultado: ResultadoAvaliacao
    evidencias: tuple[Evidencia, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "respostas", MappingProxyType(dict(self.respostas)))
