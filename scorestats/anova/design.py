"""
ANOVA design object.

Wraps validated groups and metadata for one-way ANOVA computation.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from scorestats.core.validation import (
    check_alpha,
    check_array,
    check_finite,
    check_1d,
    check_not_empty,
)
from scorestats.core.exceptions import InvalidInputError, InsufficientGroupsError


@dataclass(frozen=True)
class AnovaDesign:
    """
    Validated data container for one-way ANOVA.

    Created via factory methods, not directly.
    """
    groups: tuple[NDArray[np.floating[Any]], ...]
    labels: tuple[str, ...]
    n: int
    alpha: float

    @staticmethod
    def for_oneway(
        groups: Any,
        *,
        alpha: float = 0.05,
    ) -> 'AnovaDesign':
        """
        Create design for one-way ANOVA.

        Args:
            groups: Ordered collection of samples, or a mapping of
                label -> sample. Unlabelled groups are named group_1,
                group_2, ... in order.
            alpha: Significance threshold in (0, 1)

        Returns:
            AnovaDesign for one-way ANOVA

        Raises:
            InsufficientGroupsError: fewer than 2 groups
            InvalidInputError: an empty or malformed group, or bad alpha
        """
        alpha = check_alpha(alpha)

        if isinstance(groups, (str, bytes)):
            raise InvalidInputError(
                "groups: expected a collection of samples, got a string",
                name="groups",
            )

        if isinstance(groups, Mapping):
            labels = tuple(str(k) for k in groups.keys())
            raw = list(groups.values())
        else:
            try:
                raw = list(groups)
            except TypeError as e:
                raise InvalidInputError(
                    f"groups: expected a collection of samples, got {type(groups).__name__}",
                    name="groups",
                ) from e
            labels = tuple(f"group_{i + 1}" for i in range(len(raw)))

        if len(raw) < 2:
            raise InsufficientGroupsError(
                f"groups: need at least 2 groups, got {len(raw)}",
                n_groups=len(raw),
            )

        validated = []
        for label, sample in zip(labels, raw):
            arr = check_array(sample, label)
            check_1d(arr, label)
            check_not_empty(arr, label)
            check_finite(arr, label)
            arr.flags.writeable = False
            validated.append(arr)

        return AnovaDesign(
            groups=tuple(validated),
            labels=labels,
            n=sum(len(g) for g in validated),
            alpha=alpha,
        )

    @property
    def k(self) -> int:
        """Number of groups."""
        return len(self.groups)

    def __repr__(self) -> str:
        sizes = ", ".join(str(len(g)) for g in self.groups)
        return f"AnovaDesign(k={self.k}, n={self.n}, sizes=[{sizes}])"
