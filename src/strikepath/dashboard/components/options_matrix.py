"""Options matrix component.

Lists contracts of one type grouped by expiry and lets the user pick one.
"""

from typing import List, Optional

import polars as pl
import streamlit as st

from strikepath.market.contract_generator import group_by_expiry
from strikepath.models.chart_state import ContractType, OptionContract


def contracts_to_frame(contracts: List[OptionContract]) -> pl.DataFrame:
    """Tabulate contracts for display.

    Args:
        contracts: Contracts to list

    Returns:
        DataFrame with symbol, expiry, dte, type, strike, bid, ask, premium, open_interest
    """
    return pl.DataFrame(
        {
            "symbol": [c.symbol for c in contracts],
            "expiry": [c.expiry for c in contracts],
            "dte": [c.days_to_expiry for c in contracts],
            "type": [c.contract_type.value for c in contracts],
            "strike": [c.strike for c in contracts],
            "bid": [round(c.bid, 2) for c in contracts],
            "ask": [round(c.ask, 2) for c in contracts],
            "premium": [round(c.premium, 2) for c in contracts],
            "open_interest": [c.open_interest for c in contracts],
        },
        schema={
            "symbol": pl.Utf8,
            "expiry": pl.Utf8,
            "dte": pl.Int64,
            "type": pl.Utf8,
            "strike": pl.Float64,
            "bid": pl.Float64,
            "ask": pl.Float64,
            "premium": pl.Float64,
            "open_interest": pl.Int64,
        },
    )


def options_matrix(
    contracts: List[OptionContract],
    selected: Optional[OptionContract],
    current_price: float,
) -> Optional[OptionContract]:
    """Render the matrix with a call/put toggle and return the chosen contract."""
    st.markdown("### Options Matrix")

    side = st.radio("Type", ["CALLS", "PUTS"], horizontal=True, key="matrix_side")
    contract_type = ContractType.CALL if side == "CALLS" else ContractType.PUT
    groups = group_by_expiry(contracts, contract_type)

    choice = selected
    for expiry, group in groups.items():
        with st.expander(f"{expiry} ({group[0].days_to_expiry}D)", expanded=False):
            st.dataframe(contracts_to_frame(group), hide_index=True, use_container_width=True)
            labels = {f"${c.strike:.0f} @ ${c.premium:.2f}": c for c in group}
            pick = st.selectbox("Contract", ["-"] + list(labels), key=f"pick_{expiry}_{side}")
            if pick != "-" and st.button("Select", key=f"select_{expiry}_{side}"):
                choice = labels[pick]

    st.caption(f"Spot ${current_price:.2f}")
    return choice
