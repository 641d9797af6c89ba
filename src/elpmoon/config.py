from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from .core.errors import ContractViolation
from .theory.arguments import FULL_SERIES, LINEAR_SERIES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TheoryConfig:
    """
    Evaluation options for the position composer.

    - earth_figure_linear: "dedicated" multiplies the ELP7-9 tables by t;
      "reference" reuses the constant ELP4-6 tables for the t part.
    - main_problem_terms: polynomial length of the arguments used for ELP1-3.
    - perturbation_terms: polynomial length of the arguments used for ELP4-36.
    """
    earth_figure_linear: Literal["dedicated", "reference"] = "dedicated"
    main_problem_terms: int = FULL_SERIES
    perturbation_terms: int = LINEAR_SERIES

    def __post_init__(self):
        if self.earth_figure_linear not in ("dedicated", "reference"):
            raise ContractViolation("earth_figure_linear must be 'dedicated' or 'reference'")
        for name in ("main_problem_terms", "perturbation_terms"):
            n = getattr(self, name)
            if isinstance(n, bool) or not isinstance(n, int) or not 1 <= n <= FULL_SERIES:
                raise ContractViolation(f"{name} must be an integer in 1..{FULL_SERIES}")
        if self.earth_figure_linear == "reference":
            logger.warning(
                "Earth figure t-terms will reuse the constant tables (ELP4-6) instead of ELP7-9"
            )


DEFAULT_CONFIG = TheoryConfig()
