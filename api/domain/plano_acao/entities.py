# api/domain/plano_acao/entities.py
from __future__ import annotations

from dataclasses import dataclass

from .enums import Prazo, Prioridade

PRAZO_DESCRICAO: dict[Prazo, str] = {
    Prazo.UM_MES: "Imediato",
    Prazo.TRES_MESES: "Curto Prazo",
    Prazo.SEIS_MESES: "Médio Prazo",
    Prazo.UM_ANO: "Anual",
    Prazo.CINCO_ANOS: "Longo Prazo",
}


@dataclass(frozen=True)
class AcaoPlano:
    """Acao derivada do resultado. Sem identidade propria alem da posicao no plano."""

    titulo: str
    descricao: str
    prazo: Prazo
    responsavel: str
    impacto: str
    prioridade: Prioridade
    categoria: str

    @property
    def prazo_descricao(self) -> str:
        return PRAZO_DESCRICAO[self.prazo]
