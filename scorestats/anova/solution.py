"""
User-facing ANOVA solution types.

AnovaSolution wraps a Result[AnovaParams] and provides convenient accessors,
formatted summary output and the ANOVA table.
"""

from dataclasses import dataclass
from typing import Any

from scorestats.core.result import Result
from scorestats.anova._common import AnovaParams, AnovaTableRow


@dataclass
class AnovaSolution:
    """
    User-facing result for one-way ANOVA.

    Produced by one_way_anova().
    """
    _result: Result[AnovaParams]

    @property
    def f_statistic(self) -> float:
        return self._result.params.f_statistic

    @property
    def p_value(self) -> float:
        """Approximate upper-tail p-value, in [0.001, 0.999] or exactly 1."""
        return self._result.params.p_value

    @property
    def is_significant(self) -> bool:
        return self._result.params.is_significant

    @property
    def between_group_variance(self) -> float:
        """Between-groups mean square."""
        return self._result.params.between_group_variance

    @property
    def within_group_variance(self) -> float:
        """Within-groups (residual) mean square."""
        return self._result.params.within_group_variance

    @property
    def total_variance(self) -> float:
        """Total sum of squares about the grand mean."""
        return self._result.params.total_variance

    @property
    def degrees_of_freedom_between(self) -> int:
        return self._result.params.degrees_of_freedom_between

    @property
    def degrees_of_freedom_within(self) -> int:
        return self._result.params.degrees_of_freedom_within

    @property
    def eta_squared(self) -> float:
        return self._result.params.eta_squared

    @property
    def table(self) -> tuple[AnovaTableRow, ...]:
        """ANOVA table rows: Between groups, Residuals, Total."""
        return self._result.params.table

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def n_groups(self) -> int:
        return self._result.params.n_groups

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def group_means(self) -> dict[str, float]:
        return self._result.params.group_means

    @property
    def group_sizes(self) -> dict[str, int]:
        return self._result.params.group_sizes

    @property
    def alpha(self) -> float:
        return self._result.params.alpha

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
            'f_statistic': p.f_statistic,
            'p_value': p.p_value,
            'is_significant': p.is_significant,
            'between_group_variance': p.between_group_variance,
            'within_group_variance': p.within_group_variance,
            'total_variance': p.total_variance,
            'degrees_of_freedom_between': p.degrees_of_freedom_between,
            'degrees_of_freedom_within': p.degrees_of_freedom_within,
            'eta_squared': p.eta_squared,
        }

    def summary(self) -> str:
        """Generate an ANOVA summary table."""
        lines = [
            "One-way Analysis of Variance",
            "=" * 72,
            f"Observations: {self.n_obs}    Groups: {self.n_groups}",
            "",
            f"{'Source':<20} {'Df':>6} {'Sum Sq':>12} {'Mean Sq':>12} {'F value':>10} {'Pr(>F)':>8}",
            "-" * 72,
        ]

        for row in self.table:
            if row.f_value is not None:
                sig = _significance_stars(row.p_value)
                lines.append(
                    f"{row.term:<20} {row.df:>6} {row.sum_sq:>12.3f} "
                    f"{row.mean_sq:>12.3f} {row.f_value:>10.3f} "
                    f"{row.p_value:>8.3f} {sig}"
                )
            elif row.mean_sq is not None:
                lines.append(
                    f"{row.term:<20} {row.df:>6} {row.sum_sq:>12.3f} "
                    f"{row.mean_sq:>12.3f}"
                )
            else:
                lines.append(f"{row.term:<20} {row.df:>6} {row.sum_sq:>12.3f}")

        lines.append("-" * 72)
        lines.append("Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 '.' 0.1 ' ' 1")
        lines.append("")
        lines.append(f"eta^2 = {self.eta_squared:.3f}")
        lines.append("Group means:")
        for label, mean in self.group_means.items():
            lines.append(f"  {label}: {mean:.3f} (n={self.group_sizes[label]})")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"AnovaSolution(k={self.n_groups}, n={self.n_obs}, "
            f"F={self.f_statistic:.4g}, p_value={self.p_value:.4g})"
        )


def _significance_stars(p: float | None) -> str:
    """Return significance stars for a p-value."""
    if p is None:
        return ""
    if p <= 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    if p < 0.1:
        return "."
    return ""
