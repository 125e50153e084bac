from .aggregate_search import AggregateSearchUseCase
from .source_detail import SourceDetailUseCase

__all__ = [
    "AggregateSearchUseCase",
    "SourceDetailUseCase",
]
