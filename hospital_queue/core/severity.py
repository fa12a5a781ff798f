from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from .config import settings


class UnknownDiseaseError(KeyError):
    """Raised when a disease has no entry in the severity table."""

    def __init__(self, disease: str):
        super().__init__(disease)
        self.disease = disease

    def __str__(self) -> str:
        return f"Unknown disease: {self.disease!r}"


class SeverityTable(Mapping[str, int]):
    """Read-only mapping from disease name to priority rank.

    Names must match exactly (no case folding or trimming). The table is
    frozen on construction and cannot be mutated afterwards. Without explicit
    ranks it is built from the configured DISEASE_SEVERITY.
    """

    def __init__(self, ranks: Optional[Mapping[str, int]] = None):
        source = settings.DISEASE_SEVERITY if ranks is None else ranks
        for disease, rank in source.items():
            if not isinstance(rank, int) or isinstance(rank, bool) or rank <= 0:
                raise ValueError(f"Rank for {disease!r} must be a positive integer, got {rank!r}")
        self._ranks: Mapping[str, int] = MappingProxyType(dict(source))

    def __getitem__(self, disease: str) -> int:
        return self._ranks[disease]

    def __iter__(self) -> Iterator[str]:
        return iter(self._ranks)

    def __len__(self) -> int:
        return len(self._ranks)

    def __repr__(self) -> str:
        return f"<SeverityTable(entries={len(self)})>"

    def lookup(self, disease: str) -> Optional[int]:
        """Return the rank for ``disease`` or None when it is not listed."""
        return self._ranks.get(disease)

    def rank(self, disease: str) -> int:
        """Return the rank for ``disease``, raising UnknownDiseaseError if absent."""
        try:
            return self._ranks[disease]
        except KeyError:
            raise UnknownDiseaseError(disease) from None

    def is_valid(self, disease: str) -> bool:
        return disease in self._ranks

    def as_dict(self) -> Dict[str, int]:
        return dict(self._ranks)


def load_severity_table(ranks: Optional[Mapping[str, int]] = None) -> SeverityTable:
    """Build the table from settings unless explicit ranks are given."""
    return SeverityTable(ranks)
