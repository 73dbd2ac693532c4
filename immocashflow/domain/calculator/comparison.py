"""Verdicts for a set of saved simulations.

Each simulation gets exactly one badge, first matching rule wins:
best after-tax cash flow, best gross yield, lowest price, positive
cash flow, and finally the saving-effort default.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from immocashflow.domain.models.simulation import Badge, SavedSimulation, Verdict


def get_simulation_verdict(
    sim: SavedSimulation,
    all_sims: Sequence[SavedSimulation],
) -> Verdict | None:
    """Badge ``sim`` relative to ``all_sims``.

    Returns None when fewer than two simulations are compared. Ties go to
    the simulation listed first.
    """
    if len(all_sims) < 2:
        return None

    # sorted() is stable: equal keys keep list order
    best_cashflow = sorted(all_sims, key=lambda s: -s.results.monthly_cash_flow_net_net)[0]
    best_yield = sorted(all_sims, key=lambda s: -s.results.yield_brut)[0]
    lowest_price = sorted(all_sims, key=lambda s: s.data.price)[0]

    cash_flow = sim.results.monthly_cash_flow_net_net

    if sim.id == best_cashflow.id:
        return Verdict(
            badge=Badge.CASHFLOW_KING,
            description=f"Meilleur cash-flow du comparatif (+{round(cash_flow)}€).",
        )

    if sim.id == best_yield.id:
        return Verdict(
            badge=Badge.TOP_YIELD,
            description=f"La plus forte rentabilité brute ({sim.results.yield_brut:.1f}%).",
        )

    if sim.id == lowest_price.id:
        return Verdict(
            badge=Badge.ENTRY_TICKET,
            description="Le projet le plus accessible financièrement.",
        )

    if cash_flow > 0:
        return Verdict(
            badge=Badge.SELF_FINANCED,
            description="Génère du cash-flow positif.",
        )

    return Verdict(
        badge=Badge.SAVING_EFFORT,
        description=f"Nécessite {abs(round(cash_flow))}€ d'effort mensuel.",
    )


def rank_simulations(sims: Sequence[SavedSimulation]) -> pd.DataFrame:
    """Comparison table, one row per simulation, best cash flow first."""
    columns = [
        "ID", "Nom", "Prix", "Cash-Flow Net d'Impôt", "Rendement Brut",
        "Rendement Net", "Score", "Badge",
    ]
    if not sims:
        return pd.DataFrame(columns=columns)

    rows = []
    for sim in sims:
        verdict = get_simulation_verdict(sim, sims)
        rows.append({
            "ID": sim.id,
            "Nom": sim.name,
            "Prix": sim.data.price,
            "Cash-Flow Net d'Impôt": sim.results.monthly_cash_flow_net_net,
            "Rendement Brut": sim.results.yield_brut,
            "Rendement Net": sim.results.yield_net,
            "Score": sim.score,
            "Badge": verdict.badge.value if verdict else None,
        })

    df = pd.DataFrame(rows, columns=columns)
    return df.sort_values("Cash-Flow Net d'Impôt", ascending=False, kind="stable").reset_index(drop=True)
