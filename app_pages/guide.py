import streamlit as st

from config.instruments import DIVISORS
from config.settings import HISTORY_LIMIT, RISK_BUDGET


def guide_main():
    st.title("📘 Guide — Point Sizer")

    rows = "\n".join(f"| {m.label} | {d:g} |" for m, d in DIVISORS.items())
    st.markdown(f"""
## What this page does
Turns a stop distance in **points** into a size for the selected instrument:

`result = {RISK_BUDGET:g} / (points × divisor)`

| Mode | Divisor |
|---|---|
{rows}

## How to use it (fast)
1) Pick **SP1!** or **NQ1!**
2) Type the points and press **Enter** (or Calculate)
3) Copy the result (shown with one decimal)

The last **{HISTORY_LIMIT}** calculations are kept under *Recent Activity*,
newest first, and survive restarts. **Clear All** wipes them.
""")
