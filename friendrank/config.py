import math
import numbers
from dataclasses import dataclass, fields, replace as _replace

from .errors import InvalidConfiguration

# boundary-contract spelling -> field name
_KEY_ALIASES = {
    "dampingFactor": "damping_factor",
    "damping": "damping_factor",
    "maxIterations": "max_iterations",
    "max_iter": "max_iterations",
    "tol": "tolerance",
}


@dataclass(frozen=True)
class PageRankConfig:
    damping_factor: float = 0.85
    max_iterations: int = 50
    tolerance: float = 1e-6

    @classmethod
    def from_mapping(cls, options):
        """Build a config from a plain dict, accepting camelCase or snake_case keys."""
        return cls().replace(**dict(options or {})).validate()

    def replace(self, **overrides):
        known = {f.name for f in fields(self)}
        changes = {}
        for key, value in overrides.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in known:
                raise InvalidConfiguration(f"unrecognized option {key!r}")
            changes[name] = value
        return _replace(self, **changes)

    def validate(self):
        d = self.damping_factor
        if isinstance(d, bool) or not isinstance(d, numbers.Real) or not 0.0 < d < 1.0:
            raise InvalidConfiguration(f"damping_factor must lie in (0, 1), got {d!r}")
        it = self.max_iterations
        if isinstance(it, bool) or not isinstance(it, numbers.Integral) or it <= 0:
            raise InvalidConfiguration(f"max_iterations must be a positive int, got {it!r}")
        tol = self.tolerance
        if (isinstance(tol, bool) or not isinstance(tol, numbers.Real)
                or not math.isfinite(tol) or tol <= 0):
            raise InvalidConfiguration(f"tolerance must be a positive finite number, got {tol!r}")
        return self
