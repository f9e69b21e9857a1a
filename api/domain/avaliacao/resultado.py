# api/domain/avaliacao/resultado.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .enums import NivelMaturidade, Resposta

# ADR: Credito por resposta como constante de modulo, nao hardcoded em funcoes.
# None = excluida do numerador E do denominador (mesmo efeito de nao respondida).
CREDITO: dict[Resposta, float | None] = {
    Resposta.SIM: 1.0,
    Resposta.PARCIAL: 0.5,
    Resposta.NAO: 0.0,
    Resposta.NAO_SE_APLICA: None,
}

# Limites inferiores inclusivos. Mesmos cortes para categoria e para o geral.
LIMIAR_EXCELENTE = 80.0
LIMIAR_REGULAR = 40.0


def classificar_nivel(percentual: float) -> NivelMaturidade:
    if percentual >= LIMIAR_EXCELENTE:
        return NivelMaturidade.EXCELENTE
    if percentual >= LIMIAR_REGULAR:
        return NivelMaturidade.REGULAR
    return NivelMaturidade.CRITICO


def percentual_de(pontos: float, maximo: float) -> float:
    """pontos/maximo*100, ou 0 quando maximo == 0 (nunca NaN)."""
    return pontos / maximo * 100 if maximo > 0 else 0.0


@dataclass(frozen=True)
class PontuacaoCategoria:
    pontos: float
    maximo: float
    percentual: float

    @property
    def nivel(self) -> NivelMaturidade:
        return classificar_nivel(self.percentual)


@dataclass(frozen=True)
class ResultadoAvaliacao:
    """Resultado derivado. Imutavel, recalculado a cada mudanca de entrada."""

    pontuacao_total: float
    pontuacao_maxima: float
    percentual: float
    nivel: NivelMaturidade
    categorias: Mapping[str, PontuacaoCategoria] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "categorias", MappingProxyType(dict(self.categorias)))

    def percentual_categoria(self, categoria_id: str) -> float:
        """Percentual da categoria; categoria ausente no resultado conta como 0."""
        pontuacao = self.categorias.get(categoria_id)
        return pontuacao.percentual if pontuacao is not None else 0.0

    @classmethod
    def de_categorias(cls, categorias: Mapping[str, PontuacaoCategoria]) -> ResultadoAvaliacao:
        """Consolida o geral a partir das categorias (somas + mesma guarda de zero)."""
        total = sum(c.pontos for c in categorias.values())
        maximo = sum(c.maximo for c in categorias.values())
        percentual = percentual_de(total, maximo)
        return cls(
            pontuacao_total=total,
            pontuacao_maxima=maximo,
            percentual=percentual,
            nivel=classificar_nivel(percentual),
            categorias=categorias,
        )
