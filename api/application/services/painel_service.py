# api/application/services/painel_service.py
from __future__ import annotations

from api.domain.avaliacao.repository import SubmissaoRepository
from api.domain.plano_acao.regras import RegrasPlano
from api.domain.questionario.entities import Catalogo

from ..dtos.avaliacao_dto import ResultadoDTO, plano_por_prazo_dto
from ..dtos.painel_dto import PainelDTO, SetorDTO
from .agregacao_service import agregar_resultados, contar_setores
from .plano_acao_service import agrupar_por_prazo, gerar_plano


class PainelService:
    """Visao consolidada do municipio: agrega todas as submissoes e gera o plano integrado."""

    def __init__(
        self,
        submissao_repo: SubmissaoRepository,
        catalogo: Catalogo,
        regras: RegrasPlano,
    ) -> None:
        self._submissao_repo = submissao_repo
        self._catalogo = catalogo
        self._regras = regras

    def obter_painel(self) -> PainelDTO:
        submissoes = self._submissao_repo.listar()
        setores = contar_setores(s.respondente for s in submissoes)

        agregado = agregar_resultados(self._catalogo, [s.resultado for s in submissoes])
        if agregado is None:
            return PainelDTO(
                total_submissoes=0,
                setores=[],
                resultado=None,
                plano_por_prazo={},
            )

        plano = gerar_plano(self._catalogo, agregado, self._regras)
        return PainelDTO(
            total_submissoes=len(submissoes),
            setores=[SetorDTO(nome=nome, quantidade=qtd) for nome, qtd in setores],
            resultado=ResultadoDTO.from_domain(agregado),
            plano_por_prazo=plano_por_prazo_dto(agrupar_por_prazo(plano)),
            titulos_categorias={cid: self._titulo(cid) for cid in agregado.categorias},
        )

    def _titulo(self, categoria_id: str) -> str:
        categoria = self._catalogo.categoria(categoria_id)
        return categoria.titulo_limpo if categoria is not None else categoria_id
