"""str-similarity: string similarity and distance over a fixed algorithm catalog."""

from __future__ import annotations

from str_similarity.api import compute_all, compute_one, list_algorithms
from str_similarity.catalog import Algorithm, CatalogEntry
from str_similarity.comparator import SimilarityComparator
from str_similarity.config import MetricConfig
from str_similarity.metrics import Measurement
from str_similarity.resolver import UnknownAlgorithmError
from str_similarity.result import ComputationRequest, coerce

__version__: str = "0.1.0"
__all__: list[str] = [
    "Algorithm",
    "CatalogEntry",
    "ComputationRequest",
    "Measurement",
    "MetricConfig",
    "SimilarityComparator",
    "UnknownAlgorithmError",
    "coerce",
    "compute_all",
    "compute_one",
    "list_algorithms",
]
