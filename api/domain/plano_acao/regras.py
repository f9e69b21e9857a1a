# api/domain/plano_acao/regras.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from api.domain.avaliacao.enums import NivelMaturidade

from .enums import Prazo, Prioridade

PLACEHOLDER_CATEGORIA = "{cat}"
CHAVE_PADRAO = "default"

# ADR: Responsavel depende SO do prazo; impacto depende SO do nivel.
# Nenhum dos dois varia por categoria; ficam fora da tabela de regras.
RESPONSAVEL_POR_PRAZO: dict[Prazo, str] = {
    Prazo.UM_MES: "Gestão / Gabinete",
    Prazo.TRES_MESES: "Coordenação Jurídica/Técnica",
    Prazo.SEIS_MESES: "Planejamento e Projetos",
    Prazo.UM_ANO: "Secretaria Executiva",
    Prazo.CINCO_ANOS: "Conselho Municipal / Prefeito",
}

IMPACTO_POR_NIVEL: dict[NivelMaturidade, str] = {
    NivelMaturidade.CRITICO: "Mitigação de Risco",
    NivelMaturidade.REGULAR: "Eficiência Operacional",
    NivelMaturidade.EXCELENTE: "Inovação e Legado",
}


@dataclass(frozen=True)
class ModeloAcao:
    """Uma celula da tabela: textos com {cat} + prioridade."""

    titulo: str
    descricao: str
    prioridade: Prioridade

    def __post_init__(self) -> None:
        if PLACEHOLDER_CATEGORIA not in self.descricao:
            raise ValueError(f"Modelo sem placeholder {PLACEHOLDER_CATEGORIA}: {self.titulo!r}")

    def instanciar(self, texto_categoria: str) -> tuple[str, str]:
        """(titulo, descricao) com TODAS as ocorrencias do placeholder substituidas."""
        return (
            self.titulo.replace(PLACEHOLDER_CATEGORIA, texto_categoria),
            self.descricao.replace(PLACEHOLDER_CATEGORIA, texto_categoria),
        )


ModelosPorPrazo = Mapping[Prazo, ModeloAcao]


@dataclass(frozen=True)
class RegrasPlano:
    """Tabela plana (entidade, nivel) -> 5 celulas, com fallback para "default".

    Invariantes validados na construcao:
      - "default" define os tres niveis;
      - toda entrada cobre os cinco prazos.
    Assim a geracao do plano nunca falha por falta de regra.
    """

    tabela: Mapping[tuple[str, NivelMaturidade], ModelosPorPrazo]

    def __post_init__(self) -> None:
        for nivel in NivelMaturidade:
            if (CHAVE_PADRAO, nivel) not in self.tabela:
                raise ValueError(f"Regras sem conjunto padrao para o nivel {nivel.value!r}")
        for (entidade, nivel), modelos in self.tabela.items():
            faltando = [p.value for p in Prazo if p not in modelos]
            if faltando:
                raise ValueError(f"Regras de {entidade!r}/{nivel.value!r} sem os prazos {faltando}")
        object.__setattr__(
            self,
            "tabela",
            MappingProxyType({chave: MappingProxyType(dict(m)) for chave, m in self.tabela.items()}),
        )

    def modelos(self, categoria_id: str, nivel: NivelMaturidade) -> ModelosPorPrazo:
        especificos = self.tabela.get((categoria_id, nivel))
        if especificos is not None:
            return especificos
        return self.tabela[(CHAVE_PADRAO, nivel)]


def construir_regras(
    dados: Mapping[str, Mapping[NivelMaturidade, Mapping[Prazo, tuple[str, str, Prioridade]]]],
) -> RegrasPlano:
    """Monta RegrasPlano a partir de {entidade: {nivel: {prazo: (titulo, descricao, prioridade)}}}."""
    tabela: dict[tuple[str, NivelMaturidade], dict[Prazo, ModeloAcao]] = {}
    for entidade, por_nivel in dados.items():
        for nivel, por_prazo in por_nivel.items():
            tabela[(entidade, nivel)] = {
                prazo: ModeloAcao(titulo=titulo, descricao=descricao, prioridade=prioridade)
                for prazo, (titulo, descricao, prioridade) in por_prazo.items()
            }
    return RegrasPlano(tabela=tabela)
