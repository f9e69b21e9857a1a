# api/infrastructure/pdf_generator.py
from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.application.dtos.painel_dto import PainelDTO


def gerar_pdf_painel(painel: PainelDTO) -> bytes:
    """Generate the consolidated municipal ESG report as PDF.

    Raises RuntimeError if weasyprint is not installed.
    """
    try:
        from weasyprint import HTML  # type: ignore[import-untyped,import-not-found]
    except ImportError as err:
        msg = "PDF export requires weasyprint. Install with: pip install diagnostico-esg[pdf]"
        raise RuntimeError(msg) from err

    html = _build_html(painel)
    return HTML(string=html).write_pdf()  # type: ignore[no-any-return]


def _build_html(painel: PainelDTO) -> str:
    sections: list[str] = []

    # Header
    sections.append("""
    <h1>Relatorio Consolidado de Diagnostico ESG Municipal</h1>
    <p class="disclaimer">Media das autoavaliacoes registradas pelas secretarias e setores.</p>
    """)

    # Diagnostico geral
    resultado = painel.resultado
    indice = f"{resultado.percentual:.1f}% ({escape(resultado.nivel)})" if resultado else "-"
    sections.append(f"""
    <h2>Diagnostico Geral</h2>
    <table>
        <tr><td class="label">Diagnosticos Realizados</td><td>{painel.total_submissoes}</td></tr>
        <tr><td class="label">Setores Participantes</td><td>{len(painel.setores)}</td></tr>
        <tr><td class="label">Indice Global</td><td>{indice}</td></tr>
    </table>
    """)

    # Categorias
    if resultado and resultado.categorias:
        titulos = painel.titulos_categorias
        cat_rows = "".join(
            f"<tr><td>{escape(titulos.get(cat_id, cat_id))}</td><td>{p.percentual:.1f}%</td><td>{escape(p.nivel)}</td></tr>"
            for cat_id, p in resultado.categorias.items()
        )
        sections.append(f"""
        <h2>Desempenho por Categoria</h2>
        <table>
            <tr><th>Categoria</th><th>Percentual</th><th>Nivel</th></tr>
            {cat_rows}
        </table>
        """)

    # Setores
    if painel.setores:
        setor_rows = "".join(f"<tr><td>{escape(s.nome)}</td><td>{s.quantidade}</td></tr>" for s in painel.setores)
        sections.append(f"""
        <h2>Participacao por Setor</h2>
        <table>
            <tr><th>Setor</th><th>Diagnosticos</th></tr>
            {setor_rows}
        </table>
        """)

    # Plano de acao, um bloco por prazo
    for prazo, acoes in painel.plano_por_prazo.items():
        if not acoes:
            continue
        acao_rows = "".join(
            f"<tr><td>{escape(a.categoria)}</td><td><strong>{escape(a.titulo)}</strong><br>{escape(a.descricao)}</td>"
            f"<td>{escape(a.prioridade)}</td><td>{escape(a.responsavel)}</td><td>{escape(a.impacto)}</td></tr>"
            for a in acoes
        )
        sections.append(f"""
        <h2>Plano de Acao: {escape(prazo)} ({escape(acoes[0].prazo_descricao)})</h2>
        <table>
            <tr><th>Categoria</th><th>Acao</th><th>Prioridade</th><th>Responsavel</th><th>Impacto</th></tr>
            {acao_rows}
        </table>
        """)

    body = "\n".join(sections)

    return f"""<!DOCTYPE html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<title>Diagnostico ESG Municipal</title>
<style>
    body {{ font-family: Arial, sans-serif; margin: 40px; font-size: 11px; color: #333; }}
    h1 {{ font-size: 18px; border-bottom: 2px solid #333; padding-bottom: 8px; }}
    h2 {{ font-size: 14px; margin-top: 24px; color: #555; }}
    table {{ width: 100%; border-collapse: collapse; margin-top: 8px; }}
    th, td {{ border: 1px solid #ddd; padding: 6px 8px; text-align: left; vertical-align: top; }}
    th {{ background-color: #f5f5f5; font-weight: bold; }}
    .label {{ font-weight: bold; width: 180px; background-color: #f9f9f9; }}
    .disclaimer {{ font-size: 10px; color: #888; font-style: italic; margin-bottom: 16px; }}
</style>
</head>
<body>
{body}
</body>
</html>"""
