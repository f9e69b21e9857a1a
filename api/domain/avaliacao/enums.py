# api/domain/avaliacao/enums.py
from __future__ import annotations

from enum import StrEnum


class Resposta(StrEnum):
    SIM = "YES"
    PARCIAL = "PARTIAL"
    NAO = "NO"
    NAO_SE_APLICA = "NA"  # legado: nunca entra no calculo

    @classmethod
    def normalizar(cls, valor: object) -> Resposta | None:
        """Resposta valida ou None. Valor fora da enumeracao = nao respondida."""
        if isinstance(valor, Resposta):
            return valor
        if not isinstance(valor, str):
            return None
        try:
            return cls(valor.strip().upper())
        except ValueError:
            return None


class NivelMaturidade(StrEnum):
    CRITICO = "Crítico"  # 0-39%
    REGULAR = "Em Desenvolvimento"  # 40-79%
    EXCELENTE = "Excelente"  # 80-100%
