# api/application/services/export_service.py
from __future__ import annotations

import csv
import io

from ..dtos.painel_dto import PainelDTO


class ExportService:
    def exportar_json(self, painel: PainelDTO) -> str:
        return painel.model_dump_json(indent=2)

    def exportar_csv(self, painel: PainelDTO) -> str:
        output = io.StringIO()
        writer = csv.writer(output)

        # Diagnostico geral
        output.write("# DIAGNOSTICO GERAL\n")
        writer.writerow(["Campo", "Valor"])
        writer.writerow(["Diagnosticos Realizados", painel.total_submissoes])
        writer.writerow(["Setores Participantes", len(painel.setores)])
        if painel.resultado:
            writer.writerow(["Indice Global (%)", f"{painel.resultado.percentual:.1f}"])
            writer.writerow(["Nivel", painel.resultado.nivel])
        output.write("\n")

        # Categorias
        if painel.resultado:
            output.write("# CATEGORIAS\n")
            writer.writerow(["Categoria", "Percentual", "Nivel"])
            for cat_id, p in painel.resultado.categorias.items():
                writer.writerow([painel.titulos_categorias.get(cat_id, cat_id), f"{p.percentual:.1f}", p.nivel])
            output.write("\n")

        # Setores
        if painel.setores:
            output.write("# SETORES\n")
            writer.writerow(["Setor", "Diagnosticos"])
            for s in painel.setores:
                writer.writerow([s.nome, s.quantidade])
            output.write("\n")

        # Plano
        if painel.plano_por_prazo:
            output.write("# PLANO DE ACAO INTEGRADO\n")
            writer.writerow(["Prazo", "Categoria", "Titulo", "Prioridade", "Responsavel", "Impacto", "Descricao"])
            for prazo, acoes in painel.plano_por_prazo.items():
                for a in acoes:
                    writer.writerow([prazo, a.categoria, a.titulo, a.prioridade, a.responsavel, a.impacto, a.descricao])

        return output.getvalue()
