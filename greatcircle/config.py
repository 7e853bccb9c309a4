# greatcircle/config.py
"""
Typed options for a great-circle request, built from whatever the caller
passed and validated once before any computation starts.
"""
import math
from dataclasses import dataclass, field, fields
from numbers import Real
from typing import Any, Dict, Mapping, Optional

from .constants import GreatCircleConstants
from .exceptions import InvalidOptionsError

def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)

@dataclass
class ArcOptions:
    """Configuration parameters for a great-circle route."""
    properties: Dict[str, Any] = field(default_factory=dict)
    npoints: int = GreatCircleConstants.DEFAULT_NPOINTS
    offset: float = GreatCircleConstants.DEFAULT_OFFSET
    bearing: Optional[float] = None

    def __post_init__(self):
        if not isinstance(self.properties, Mapping):
            raise InvalidOptionsError("properties must be a mapping", "properties")
        if not isinstance(self.npoints, int) or isinstance(self.npoints, bool):
            raise InvalidOptionsError("npoints must be an integer", "npoints")
        if self.npoints < GreatCircleConstants.MIN_NPOINTS:
            raise InvalidOptionsError(
                f"npoints must be at least {GreatCircleConstants.MIN_NPOINTS}", "npoints")
        if not _is_number(self.offset) or not math.isfinite(self.offset) or self.offset <= 0:
            raise InvalidOptionsError("offset must be a positive number", "offset")
        if self.bearing is not None and (not _is_number(self.bearing) or not math.isfinite(self.bearing)):
            raise InvalidOptionsError("bearing must be a finite number", "bearing")

    @classmethod
    def from_value(cls, options: Any = None, **overrides: Any) -> "ArcOptions":
        """
        Builds options from None, a mapping or an existing ArcOptions.
        Keyword overrides take precedence over the values in `options`.
        """
        if options is None:
            values: Dict[str, Any] = {}
        elif isinstance(options, ArcOptions):
            values = {f.name: getattr(options, f.name) for f in fields(cls)}
        elif isinstance(options, Mapping):
            values = dict(options)
        else:
            raise InvalidOptionsError()

        values.update(overrides)
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise InvalidOptionsError("unknown option", ", ".join(unknown))
        # None means "use the default", matching an omitted key.
        return cls(**{k: v for k, v in values.items() if v is not None})
