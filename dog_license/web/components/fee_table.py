from __future__ import annotations

import pandas as pd
import streamlit as st

from dog_license.domain import LICENSE_FEES, LICENSE_LABELS
from dog_license.web.formatting import format_currency


def fee_schedule() -> pd.DataFrame:
    """Static license fee table, one row per period."""
    rows = [
        {"Period": period.value, "License": LICENSE_LABELS[period], "Fee": format_currency(fee)}
        for period, fee in LICENSE_FEES.items()
    ]
    return pd.DataFrame(rows, columns=["Period", "License", "Fee"])


def render_fee_schedule(caption: str = "") -> None:
    df = fee_schedule()
    st.dataframe(df[["License", "Fee"]], hide_index=True, use_container_width=True)
    if caption:
        st.caption(caption)
