"""Win-rate statistics over played rounds."""

import numpy as np
import pandas as pd

STRATEGY_LABELS = {0: "Stay", 1: "Switch"}


###############################################################################
# Utility: Wilson confidence interval for a binomial proportion (nice for small n)
###############################################################################
def wilson_interval(k, n, z=1.96):
    if n == 0:
        return (np.nan, np.nan, np.nan)
    phat = k / n
    denom = 1 + z**2 / n
    center = (phat + z**2/(2*n)) / denom
    half_width = (z*np.sqrt((phat*(1-phat) + z**2/(4*n))/n)) / denom
    return phat, max(0.0, center - half_width), min(1.0, center + half_width)


def strategy_summary(plays: pd.DataFrame) -> pd.DataFrame:
    """One row per strategy (Stay, Switch) with plays, wins, rate and 95% CI.

    ``plays`` needs integer ``switched`` and ``won`` columns. Both strategies
    are always present; a strategy with no plays reports zeros.
    """
    rows = []
    for s in (0, 1):
        if plays.empty:
            k, n = 0, 0
        else:
            subset = plays.loc[plays["switched"] == s, "won"]
            k, n = int(subset.sum()), int(subset.size)
        p, low, high = wilson_interval(k, n)
        rows.append({
            "Strategy": STRATEGY_LABELS[s],
            "Plays": n,
            "Wins": k,
            "Win Rate": p if not np.isnan(p) else 0.0,
            "CI Low": low if not np.isnan(low) else 0.0,
            "CI High": high if not np.isnan(high) else 0.0,
        })
    return pd.DataFrame(rows)


def running_win_rates(plays: pd.DataFrame) -> pd.DataFrame:
    """Expanding win rate overall and per strategy, in long format for charting."""
    if plays.empty:
        return pd.DataFrame(columns=["idx", "series", "rate"])

    df = plays.reset_index(drop=True).copy()
    df["idx"] = df.index + 1
    df["win_rate_overall"] = df["won"].expanding().mean()
    for s in (0, 1):
        mask = df["switched"] == s
        df.loc[mask, f"win_rate_{s}"] = df.loc[mask, "won"].expanding().mean()
        if f"win_rate_{s}" not in df:
            df[f"win_rate_{s}"] = np.nan

    melt_cols = ["win_rate_overall", "win_rate_0", "win_rate_1"]
    plot_df = df[["idx"] + melt_cols].melt("idx", value_name="rate", var_name="series").dropna()
    mapper = {
        "win_rate_overall": "Overall",
        "win_rate_0": STRATEGY_LABELS[0],
        "win_rate_1": STRATEGY_LABELS[1],
    }
    plot_df["series"] = plot_df["series"].map(mapper)
    return plot_df.reset_index(drop=True)
