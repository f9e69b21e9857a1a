# api/interfaces/api/dependencies.py
from fastapi import Depends

from api.application.services.avaliacao_service import AvaliacaoService
from api.application.services.export_service import ExportService
from api.application.services.painel_service import PainelService
from api.application.services.submissao_service import SubmissaoService
from api.domain.plano_acao.regras import RegrasPlano
from api.domain.plano_acao.regras_esg import REGRAS_PLANO_ESG
from api.domain.questionario.catalogo_esg import CATALOGO_ESG
from api.domain.questionario.entities import Catalogo
from api.infrastructure.duckdb_connection import get_connection
from api.infrastructure.repositories.duckdb_submissao_repo import DuckDBSubmissaoRepo


# Catalogo e regras sao configuracao; testes sobrescrevem via app.dependency_overrides.
def get_catalogo() -> Catalogo:
    return CATALOGO_ESG


def get_regras() -> RegrasPlano:
    return REGRAS_PLANO_ESG


def get_avaliacao_service(
    catalogo: Catalogo = Depends(get_catalogo),  # noqa: B008
    regras: RegrasPlano = Depends(get_regras),  # noqa: B008
) -> AvaliacaoService:
    return AvaliacaoService(catalogo=catalogo, regras=regras)


def get_submissao_service(
    catalogo: Catalogo = Depends(get_catalogo),  # noqa: B008
    regras: RegrasPlano = Depends(get_regras),  # noqa: B008
) -> SubmissaoService:
    return SubmissaoService(
        submissao_repo=DuckDBSubmissaoRepo(get_connection()),
        catalogo=catalogo,
        regras=regras,
    )


def get_painel_service(
    catalogo: Catalogo = Depends(get_catalogo),  # noqa: B008
    regras: RegrasPlano = Depends(get_regras),  # noqa: B008
) -> PainelService:
    return PainelService(
        submissao_repo=DuckDBSubmissaoRepo(get_connection()),
        catalogo=catalogo,
        regras=regras,
    )


def get_export_service() -> ExportService:
    return ExportService()
