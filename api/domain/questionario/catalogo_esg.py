# api/domain/questionario/catalogo_esg.py
"""Questionario ESG municipal (10 eixos). Dados estaticos, zero logica.

ADR: Catalogo e configuracao injetada. Os servicos nunca importam este modulo
diretamente; quem monta a chamada (dependencies.py, testes) escolhe o catalogo.
"""

from __future__ import annotations

from .entities import Catalogo, construir_catalogo

_DADOS: list[tuple[str, str, list[tuple[str, str]]]] = [
    (
        "legislacao",
        "1. Legislação e Conformidades",
        [
            ("1_1", "Existe legislação municipal específica (Código/Lei Ambiental Municipal) vigente?"),
            ("1_2", "Há decretos/portarias que regulamentam o Plano Municipal de Saneamento (PMSB) e o PMGIRS?"),
            ("1_3", "O município cumpre a PNRS (Lei 12.305) e normas correlatas aplicáveis?"),
            ("1_4", "Existe matriz de conformidade ambiental com obrigações, responsáveis e prazos?"),
            ("1_5", "As exigências ambientais estão integradas ao PPA/LDO/LOA?"),
            ("1_6", "Relatórios de conformidade, autos de infração e sanções são publicados periodicamente?"),
            ("1_7", "Há agenda oficial para atualização/modernização do marco regulatório ambiental (24 meses)?"),
            ("1_8", "Prevê adesão/fortalecimento de consórcios intermunicipais para regulação e fiscalização?"),
        ],
    ),
    (
        "agua",
        "2. Água e Saneamento",
        [
            ("2_1", "O município possui Plano Municipal de Saneamento Básico vigente (água, esgoto, drenagem e resíduos)?"),
            ("2_2", "Qual o % da população com acesso à água potável? (Considerar SIM se > 90%)"),
            ("2_3", "Qual o % da população com coleta e tratamento de esgoto? (Considerar SIM se > 80%)"),
            ("2_4", "Existe Plano de Drenagem Urbana com mapeamento de áreas de risco?"),
            ("2_5", "O PMSB está atualizado com metas até 2033 e indicadores de monitoramento?"),
            ("2_6", "Há programas de uso racional da água em prédios públicos (medição, metas, retrofit)?"),
            ("2_7", "Existem contratos/regulação (ARSE/AGEPAN/ARSAE ou congênere) com metas de desempenho?"),
            ("2_8", "Prevê PPPs/Consórcios/Captação de recursos para universalização?"),
            ("2_9", "Prevê ampliação de Soluções Baseadas na Natureza para drenagem e qualidade hídrica?"),
        ],
    ),
    (
        "residuos",
        "3. Resíduos Sólidos - PNRS",
        [
            ("3_1", "Existe PMGIRS vigente e publicado?"),
            ("3_2", "Há coleta seletiva implantada (parcial/total) com cobertura definida?"),
            ("3_3", "Existem cooperativas/associações de catadores formalizadas e integradas à cadeia?"),
            ("3_4", "A destinação final é realizada em aterro sanitário licenciado (sem lixão)?"),
            ("3_5", "Há monitoramento da taxa de reciclagem e cobertura da coleta seletiva?"),
            ("3_6", "Há acordos/setores com logística reversa (embalagens, eletroeletrônicos, pneus, óleo)?"),
            ("3_7", "Existe sistema de PEVs (Pontos de Entrega Voluntária) operando?"),
            ("3_8", "Prevê expansão da coleta seletiva por bairros e contratos com metas para cooperativas?"),
            ("3_9", "Prevê campanhas permanentes de educação ambiental e compras públicas com conteúdo reciclado?"),
            ("3_10", "O município incentiva políticas de produção mais limpa (E3P) junto a empresas e órgãos públicos?"),
            ("3_11", "Há programas de educação para consumo consciente e redução na geração de resíduos?"),
            ("3_12", "Existem editais de inovação ou programas municipais voltados à A3P?"),
        ],
    ),
    (
        "energia",
        "4. Energia e Clima",
        [
            ("4_1", "Existe inventário municipal de emissões de GEE (baseline e setores)?"),
            ("4_2", "Há projetos de eficiência energética (ex.: LED na iluminação pública/prédios)?"),
            ("4_3", "O município monitora o % de energia elétrica renovável utilizada em prédios públicos?"),
            ("4_4", "Existe plano/estratégia de adaptação climática (ondas de calor, enchentes, deslizamentos)?"),
            ("4_5", "Há geração distribuída (Solar FV) em equipamentos públicos em operação?"),
            ("4_6", "Prevê expansão de GD Fotovoltaica (PPP/Consórcios) e contratação com desempenho energético?"),
            ("4_7", "Prevê atualização quinquenal do inventário de GEE com relatório público de progresso?"),
            ("4_8", "O município prevê integrar riscos climáticos e ambientais ao orçamento municipal (PPA, LDO, LOA)?"),
        ],
    ),
    (
        "biodiversidade",
        "5. Biodiversidade e Áreas Verdes",
        [
            ("5_1", "O município possui praças, parques ou Unidades de Conservação instituídas por lei?"),
            ("5_2", "Existe programa de arborização urbana com metas anuais?"),
            ("5_3", "As UCs possuem plano de manejo implementado e conselho gestor ativo?"),
            ("5_4", "Há inventário de áreas verdes/habitante e monitoramento de cobertura vegetal?"),
            ("5_5", "Prevê criação de corredores ecológicos urbanos e recuperação de áreas degradadas?"),
            ("5_6", "Prevê ampliar áreas verdes por habitante com metas por bairro?"),
            ("5_7", "O município possui inventário de biodiversidade urbana (fauna/flora) atualizado?"),
            ("5_8", "Há programa de proteção de fauna/flora em áreas urbanas e periurbanas?"),
            ("5_9", "Indicadores de biodiversidade são monitorados e publicados?"),
        ],
    ),
    (
        "riscos",
        "6. Riscos e Defesa Civil",
        [
            ("6_1", "Existe mapeamento de áreas de risco (enchentes, deslizamentos, secas)?"),
            ("6_2", "Há plano de contingência da defesa civil municipal vigente?"),
            ("6_3", "Tempo médio de resposta a eventos críticos é monitorado e publicado?"),
            ("6_4", "Há obras e soluções baseadas na natureza previstas para macrodrenagem?"),
            ("6_5", "Prevê implantação de sistema de alerta precoce e centro de monitoramento?"),
            ("6_6", "Prevê atualização anual do plano de contingência com simulações e exercícios?"),
        ],
    ),
    (
        "ar_ruido",
        "7. Qualidade do Ar e Ruído",
        [
            ("7_1", "O município possui monitoramento sistemático da qualidade do ar?"),
            ("7_2", "Existe legislação e fiscalização de poluição sonora?"),
            ("7_3", "Relatórios de qualidade do ar são publicados periodicamente?"),
            ("7_4", "Há indicadores de ruído urbano por regiões/bairros?"),
            ("7_5", "Prevê rede de sensores digitais e painéis públicos para ar e ruído?"),
        ],
    ),
    (
        "vida_agua",
        "8. Vida na Água",
        [
            ("8_1", "O município possui cadastro e mapeamento de rios, lagos, córregos, nascentes urbanas?"),
            ("8_2", "Existe legislação municipal específica para proteção de recursos hídricos superficiais?"),
            ("8_3", "Há programa de monitoramento da qualidade da água em corpos d’água urbanos?"),
            ("8_4", "Existem ações de recuperação de margens, matas ciliares e APPs degradadas?"),
            ("8_5", "O município possui programa de controle de lançamento de efluentes domésticos/industriais?"),
            ("8_6", "São realizadas campanhas educativas sobre proteção de rios e lagos urbanos?"),
            ("8_7", "O município prevê planos de revitalização de rios urbanos nos próximos anos?"),
            ("8_8", "Há previsão de PPP ou convênios para conservação de corpos hídricos?"),
            ("8_9", "Pretende criar indicadores de monitoramento contínuo da qualidade da água?"),
        ],
    ),
    (
        "educacao",
        "9. Educação Ambiental",
        [
            ("9_1", "Existe programa municipal contínuo de Educação Ambiental (EA)?"),
            ("9_2", "As escolas municipais desenvolvem conteúdos/ações de EA?"),
            ("9_3", "Há plano anual de EA com metas, públicos e avaliação de impacto?"),
            ("9_4", "Existem parcerias com universidades/ONGs para EA comunitária?"),
            ("9_5", "Prevê institucionalizar a EA como política transversal com orçamento próprio?"),
            ("9_6", "Prevê integrar a educação ambiental ao currículo de todas as escolas?"),
        ],
    ),
    (
        "governanca",
        "10. Gestão e Governança ESG",
        [
            ("10_1", "Existe responsável técnico designado para ESG na secretaria?"),
            ("10_2", "A secretaria possui planos, políticas ou regulamentos relacionados ao ESG?"),
            ("10_3", "A secretaria participa de comitê ou grupo de trabalho ESG municipal?"),
            ("10_4", "As ações e indicadores da secretaria estão integrados ao PPA, LDO e LOA?"),
            ("10_5", "As informações da secretaria são publicadas no portal da transparência?"),
            ("10_6", "Indicadores setoriais são monitorados e divulgados?"),
            ("10_7", "Dados são publicados em formato aberto (CSV/JSON) com dicionário de dados?"),
            ("10_8", "A secretaria possui recursos orçamentários vinculados a ações ESG?"),
            ("10_9", "Existem fontes de financiamento externo (fundos, convênios, parcerias)?"),
            ("10_10", "Servidores participaram de capacitação em ESG, ODS ou sustentabilidade?"),
            ("10_11", "Há sistema de monitoramento e avaliação dos indicadores ESG da secretaria?"),
            ("10_12", "Existem metas de curto e médio prazo vinculadas ao ESG?"),
            ("10_13", "As ações da secretaria estão vinculadas a ODS específicos?"),
            ("10_14", "A secretaria promove campanhas educativas e de engajamento relacionadas ao ESG?"),
        ],
    ),
]

CATALOGO_ESG: Catalogo = construir_catalogo(_DADOS)
