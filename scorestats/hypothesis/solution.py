"""
Hypothesis test solution types.

TTestSolution and CorrelationSolution wrap Result[...Params] and provide
an htest-style summary().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from scorestats.core.result import Result
from scorestats.hypothesis._common import (
    ConfidenceInterval,
    CorrelationParams,
    TTestParams,
)

if TYPE_CHECKING:
    from scorestats.hypothesis.design import HypothesisDesign


@dataclass
class TTestSolution:
    """
    User-facing two-sample t-test results.

    All floats are rounded half-up to 3 decimals; is_significant is
    decided on the unrounded p-value.
    """
    _result: Result[TTestParams]
    _design: 'HypothesisDesign'

    @property
    def t_statistic(self) -> float:
        return self._result.params.t_statistic

    @property
    def p_value(self) -> float:
        """Approximate two-tailed p-value."""
        return self._result.params.p_value

    @property
    def degrees_of_freedom(self) -> int:
        return self._result.params.degrees_of_freedom

    @property
    def is_significant(self) -> bool:
        return self._result.params.is_significant

    @property
    def confidence_interval(self) -> ConfidenceInterval:
        """95% interval for mean(a) - mean(b)."""
        return self._result.params.confidence_interval

    @property
    def effect_size(self) -> float:
        """Cohen's d (pooled standard deviation)."""
        return self._result.params.effect_size

    @property
    def mean_a(self) -> float:
        return self._result.params.mean_a

    @property
    def mean_b(self) -> float:
        return self._result.params.mean_b

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    @property
    def conf_level(self) -> float:
        return self._result.params.conf_level

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view for report and chart layers."""
        p = self._result.params
        return {
            't_statistic': p.t_statistic,
            'p_value': p.p_value,
            'degrees_of_freedom': p.degrees_of_freedom,
            'is_significant': p.is_significant,
            'confidence_interval': {
                'lower': p.confidence_interval.lower,
                'upper': p.confidence_interval.upper,
            },
            'effect_size': p.effect_size,
        }

    def summary(self) -> str:
        """
        Format like an htest print-out.

        Produces output like:
            Two Sample t-test (pooled variance)

        data:  group_a and group_b
        t = 4, df = 8, p-value = 0.014
        alternative hypothesis: true difference in means is not equal to 0
        95 percent confidence interval:
         1.694  6.306
        sample estimates:
        mean of group_a  mean of group_b
                      7                3
        Cohen's d = 2.53 (significant at alpha = 0.05)
        """
        p = self._result.params
        ci = p.confidence_interval
        verdict = "significant" if p.is_significant else "not significant"
        lines = [
            "\tTwo Sample t-test (pooled variance)",
            "",
            f"data:  {self._design.data_name}",
            f"t = {p.t_statistic:g}, df = {p.degrees_of_freedom}, "
            f"p-value = {_format_pvalue(p.p_value)}",
            "alternative hypothesis: true difference in means is not equal to 0",
            f"{int(round(p.conf_level * 100))} percent confidence interval:",
            f" {ci.lower:g}  {ci.upper:g}",
            "sample estimates:",
            f"{'mean of group_a':>16s} {'mean of group_b':>16s}",
            f"{p.mean_a:16g} {p.mean_b:16g}",
            f"Cohen's d = {p.effect_size:g} ({verdict} at alpha = {p.alpha:g})",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"TTestSolution(t={p.t_statistic:.4g}, df={p.degrees_of_freedom}, "
            f"p_value={p.p_value:.4g}, significant={p.is_significant})"
        )


@dataclass
class CorrelationSolution:
    """User-facing Pearson correlation results."""
    _result: Result[CorrelationParams]
    _design: 'HypothesisDesign'

    @property
    def coefficient(self) -> float:
        """Pearson's r, in [-1, 1]."""
        return self._result.params.coefficient

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def is_significant(self) -> bool:
        return self._result.params.is_significant

    @property
    def strength(self) -> str:
        """'very weak', 'weak', 'moderate', 'strong' or 'very strong'."""
        return self._result.params.strength

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view for report and chart layers."""
        p = self._result.params
        return {
            'coefficient': p.coefficient,
            'p_value': p.p_value,
            'is_significant': p.is_significant,
            'strength': p.strength,
        }

    def summary(self) -> str:
        p = self._result.params
        verdict = "significant" if p.is_significant else "not significant"
        lines = [
            "\tPearson's product-moment correlation",
            "",
            f"data:  {self._design.data_name}",
            f"n = {p.n}, df = {p.n - 2}, p-value = {_format_pvalue(p.p_value)}",
            "alternative hypothesis: true correlation is not equal to 0",
            "sample estimates:",
            f"{'cor':>8s}",
            f"{p.coefficient:8g}",
            f"strength: {p.strength} ({verdict} at alpha = {p.alpha:g})",
            "",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        p = self._result.params
        return (
            f"CorrelationSolution(r={p.coefficient:.4g}, p_value={p.p_value:.4g}, "
            f"strength={p.strength!r})"
        )


def _format_pvalue(p: float) -> str:
    """Format an already-rounded p-value; 0 means below reporting precision."""
    if p < 0.001:
        return "< 0.001"
    return f"{p:.3f}"
