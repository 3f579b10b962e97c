# src/corp_finance/core/metadata.py
"""
Computation Output Envelope

Every model run returns its result wrapped with the methodology used,
an echo of the inputs, non-fatal warnings and timing metadata.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from ..constants import PRECISION

T = TypeVar('T')


@dataclass(frozen=True)
class ComputationMetadata:
    """Metadata attached to every computation."""
    version: str
    computation_time_us: int
    precision: str = PRECISION

    def to_dict(self) -> Dict[str, Any]:
        return {
            'version': self.version,
            'computation_time_us': self.computation_time_us,
            'precision': self.precision,
        }


@dataclass
class ComputationOutput(Generic[T]):
    """Standard computation output envelope."""
    result: T
    methodology: str
    assumptions: Dict[str, Any]
    warnings: List[str] = field(default_factory=list)
    metadata: Optional[ComputationMetadata] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the envelope to a JSON-friendly dictionary.

        Returns:
            Dictionary with result, methodology, assumptions, warnings
            and metadata
        """
        result = self.result.to_dict() if hasattr(self.result, 'to_dict') else self.result
        return {
            'result': result,
            'methodology': self.methodology,
            'assumptions': self.assumptions,
            'warnings': list(self.warnings),
            'metadata': self.metadata.to_dict() if self.metadata else None,
        }


def with_metadata(
    methodology: str,
    assumptions: Dict[str, Any],
    warnings: List[str],
    elapsed_us: int,
    result: T
) -> ComputationOutput[T]:
    """
    Wrap a computation result with methodology and metadata.

    Args:
        methodology: Human-readable description of the method
        assumptions: Echo of the inputs used
        warnings: Non-fatal diagnostics collected during the run
        elapsed_us: Wall-clock computation time in microseconds
        result: The computation result

    Returns:
        ComputationOutput envelope
    """
    from .. import __version__

    return ComputationOutput(
        result=result,
        methodology=methodology,
        assumptions=assumptions,
        warnings=list(warnings),
        metadata=ComputationMetadata(
            version=__version__,
            computation_time_us=int(elapsed_us),
        ),
    )
