"""
Closed-form approximations for tail probabilities and critical values.

These are deliberately coarse: the normal CDF uses the Abramowitz-Stegun
polynomial (26.2.17), small-df t p-values use a power-law tail, the
95% t critical value comes from a fixed table with nearest-df snapping,
and the F p-value is a bounded power of the beta argument. Results are
reproducible bit-for-bit across platforms; expect roughly 1-3% absolute
error against exact tables.
"""

import math


# Abramowitz & Stegun 26.2.17
_AS_P = 0.2316419
_AS_D = 0.3989423
_AS_B = (0.3193815, -0.3565638, 1.781478, -1.821256, 1.330274)

# Degrees of freedom at and above which t is treated as standard normal
NORMAL_APPROX_DF = 30

# Two-sided 95% critical values of Student's t
T_CRITICAL_95: dict[int, float] = {
    1: 12.706, 2: 4.303, 3: 3.182, 4: 2.776, 5: 2.571,
    6: 2.447, 7: 2.365, 8: 2.306, 9: 2.262, 10: 2.228,
    15: 2.131, 20: 2.086, 25: 2.060, 30: 2.042,
}
Z_CRITICAL_95 = 1.96
T_CRITICAL_FALLBACK = 2.0

F_P_VALUE_FLOOR = 0.001
F_P_VALUE_CEILING = 0.999

# Every float64 at or above this magnitude is an integer, so rounding is a no-op
_INTEGRAL_MAGNITUDE = 2.0 ** 52


def normal_cdf(x: float) -> float:
    """Standard normal CDF, Abramowitz-Stegun approximation (|error| < 7.5e-8)."""
    t = 1.0 / (1.0 + _AS_P * abs(x))
    d = _AS_D * math.exp(-x * x / 2.0)
    b1, b2, b3, b4, b5 = _AS_B
    prob = d * t * (b1 + t * (b2 + t * (b3 + t * (b4 + t * b5))))
    if x > 0:
        prob = 1.0 - prob
    return prob


def t_p_value(t: float, df: int) -> float:
    """
    Two-tailed p-value for Student's t.

    For df >= 30 the normal approximation 2 * (1 - Phi(t)) is used.
    Below that, p = min(2 * (1 + t^2/df)^(-(df+1)/2), 1).

    Args:
        t: Test statistic; callers pass |t|. May be +inf (gives 0).
        df: Degrees of freedom, >= 1
    """
    if df >= NORMAL_APPROX_DF:
        return 2.0 * (1.0 - normal_cdf(t))
    factor = 1.0 + (t * t) / df
    return min(2.0 * factor ** (-(df + 1) / 2.0), 1.0)


def nearest_table_df(df: int) -> int:
    """Tabulated df closest to ``df``; ties resolve to the smaller entry."""
    keys = sorted(T_CRITICAL_95)
    closest = keys[0]
    for key in keys[1:]:
        if abs(key - df) < abs(closest - df):
            closest = key
    return closest


def t_critical_95(df: int) -> float:
    """Two-sided 95% critical value of t, from the fixed lookup table."""
    if df >= NORMAL_APPROX_DF:
        return Z_CRITICAL_95
    return T_CRITICAL_95.get(nearest_table_df(df), T_CRITICAL_FALLBACK)


def f_p_value(f: float, df1: int, df2: int) -> float:
    """
    Upper-tail p-value for F(df1, df2).

    Returns 1 when F < 1. Otherwise x = df2 / (df2 + df1 * F) and the
    result is x^(df2/2) clamped to [0.001, 0.999].
    """
    if f < 1.0:
        return 1.0
    x = df2 / (df2 + df1 * f)
    return max(F_P_VALUE_FLOOR, min(F_P_VALUE_CEILING, x ** (df2 / 2.0)))


def round_half_up(value: float, decimals: int) -> float:
    """
    Round to ``decimals`` places, ties away from zero.

    Symmetric about zero, so round_half_up(-x) == -round_half_up(x). For
    non-negative values this agrees with floor(x * 10^d + 0.5) / 10^d.
    """
    if abs(value) >= _INTEGRAL_MAGNITUDE:
        return float(value)
    scale = 10.0 ** decimals
    magnitude = math.floor(abs(value) * scale + 0.5)
    if magnitude == 0:
        return 0.0
    return math.copysign(magnitude, value) / scale


def round3(value: float) -> float:
    """Round to 3 decimal places (ties away from zero), the precision of every reported statistic."""
    return round_half_up(value, 3)
