"""Printable project summary for a bank appointment.

Renders one evaluation as a Markdown document: project synthesis,
financing plan with its loan tranches, cash flows and yearly charges.
"""

from __future__ import annotations

from datetime import date

from immocashflow.application.services.evaluator import Evaluation
from immocashflow.domain.calculator.financial import calculate_annual_insurance
from immocashflow.domain.models.investment import InvestmentData

DISCLAIMER = (
    "Document généré à titre indicatif. "
    "Ne constitue pas une offre de prêt contractuelle."
)


def _eur(value: float) -> str:
    return f"{round(value):,}".replace(",", " ") + " €"


def _rows(pairs: list[tuple[str, str]]) -> list[str]:
    lines = ["| Poste | Montant |", "|---|---:|"]
    lines += [f"| {label} | {value} |" for label, value in pairs]
    return lines


def build_report(
    data: InvestmentData,
    evaluation: Evaluation,
    score: int,
    project_name: str | None = None,
    generated_on: date | None = None,
) -> str:
    """Render the evaluation as a Markdown "dossier bancaire".

    Args:
        data: Evaluated property
        evaluation: Output of ``evaluate_detailed`` for the chosen regime
        score: Investment score of the evaluation
        project_name: Heading shown next to the date, usually the city
        generated_on: Report date, today when omitted

    Returns:
        The report as Markdown text.
    """
    results = evaluation.results
    day = generated_on or date.today()

    lines = [
        "# Dossier Bancaire",
        "",
        f"**{project_name or 'Projet Immobilier'}** · {day.strftime('%d/%m/%Y')}",
        "",
        "## Synthèse du projet",
        "",
    ]
    price_per_sqm = (
        f"{_eur(results.total_project_cost / data.surface)}/m²" if data.surface > 0 else "n.c."
    )
    lines += _rows([
        ("Prix d'achat", _eur(data.price)),
        ("Travaux & meubles", _eur(data.works + data.furniture)),
        ("Frais de notaire", _eur(evaluation.notary_fees)),
        ("**Coût total**", f"**{_eur(results.total_project_cost)}**"),
        ("Surface", f"{data.surface:g} m²"),
        ("Prix/m² (total)", price_per_sqm),
        ("Loyer mensuel", _eur(data.monthly_rent)),
        ("Rendement brut", f"{results.yield_brut:.2f} %"),
        ("Rendement net", f"{results.yield_net:.2f} %"),
    ])

    lines += [
        "",
        "## Plan de financement",
        "",
        f"Apport personnel : {_eur(data.personal_contribution)}  ",
        f"Montant emprunté : {_eur(data.loan_amount)} sur {data.loan_duration} ans  ",
        f"Mensualité estimée : {_eur(results.monthly_mortgage)} (hors assurance)",
        "",
        "| Prêt | Montant | Taux | Mensualité |",
        "|---|---:|---:|---:|",
    ]
    for tranche in evaluation.financing.tranches:
        lines.append(
            f"| {tranche.label} | {_eur(tranche.amount)} | {tranche.rate:.2f} % "
            f"| {_eur(tranche.monthly_payment)} |"
        )

    regime = evaluation.tax.regime
    lines += [
        "",
        "## Rentabilité & trésorerie",
        "",
        f"Régime fiscal : {regime.label if regime else 'non reconnu'} "
        f"(TMI {evaluation.tax.marginal_rate_pct:.0f} %)",
        "",
    ]
    lines += _rows([
        ("Cash-flow brut", f"{_eur(results.monthly_cash_flow_brut)}/mois"),
        ("Cash-flow net", f"{_eur(results.monthly_cash_flow_net)}/mois"),
        ("Impôts (estimés)", f"-{_eur(results.taxes / 12)}/mois"),
        ("**Cash-flow net d'impôt**", f"**{_eur(results.monthly_cash_flow_net_net)}/mois**"),
        ("Score", f"{score}/100"),
    ])

    vacancy_loss = data.monthly_rent * 12 - evaluation.annual_gross_rent
    lines += ["", "### Charges annuelles (estimées)", ""]
    lines += _rows([
        ("Taxe foncière", _eur(data.property_tax)),
        ("Charges copropriété", _eur(data.condo_fees * 12)),
        ("Assurance PNO", _eur(data.pno_insurance)),
        ("Gestion", _eur(evaluation.annual_gross_rent * data.management_fees / 100.0)),
        ("Assurance emprunteur", _eur(calculate_annual_insurance(data.loan_amount, data.insurance_rate))),
        ("Vacance locative", _eur(vacancy_loss)),
    ])

    lines += ["", "---", "", f"_{DISCLAIMER}_", ""]
    return "\n".join(lines)
