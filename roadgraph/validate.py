import math
import numbers

from .options import PipelineOptions

class OptionsError(ValueError):
    pass

def _ensure_threshold(name: str, value: object, *, allow_zero: bool = True):
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or not math.isfinite(value):
        raise OptionsError(f'{name} must be a finite number (got {value!r})')
    if value < 0 or (value == 0 and not allow_zero):
        bound = '>= 0' if allow_zero else '> 0'
        raise OptionsError(f'{name} must be {bound} (got {value!r})')

def validate_options(options: PipelineOptions) -> None:
    _ensure_threshold('distance_threshold', options.distance_threshold)
    _ensure_threshold('line_distance_threshold', options.line_distance_threshold)
    _ensure_threshold('angle_threshold', options.angle_threshold)
    _ensure_threshold('grid_margin', options.grid_margin)
    _ensure_threshold('gap_factor', options.gap_factor, allow_zero=False)

    count = options.max_contain_count
    if isinstance(count, bool) or not isinstance(count, numbers.Integral) or count < 0:
        raise OptionsError(f'max_contain_count must be an integer >= 0 (got {count!r})')

    if options.spacing_reference not in ('graph', 'grid'):
        raise OptionsError(f'spacing_reference must be "graph" or "grid" (got {options.spacing_reference!r})')
