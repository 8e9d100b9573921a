"""Convert a unit value to another unit suffix."""

from __future__ import annotations

import structlog

from app.core.converter.context import ConversionOptions, Measurer, build_context
from app.core.converter.converters import CONVERTERS, supported_targets
from app.core.converter.errors import UnsupportedConversion
from app.core.converter.grammar import UnitSuffix, format_unit_value, split_unit_value

logger = structlog.get_logger(__name__)


def _as_suffix(to_unit_suffix: UnitSuffix | str) -> UnitSuffix | None:
    try:
        return UnitSuffix(to_unit_suffix)
    except ValueError:
        return None


def convert_units(
    from_value: str,
    to_unit_suffix: UnitSuffix | str,
    options: ConversionOptions | None = None,
    measurer: Measurer | None = None,
) -> str:
    """Convert ``from_value`` (e.g. "2rem") to ``to_unit_suffix`` (e.g. "px").

    Context values (font sizes, viewport) come from ``options``, then from
    ``measurer``, then from DEFAULT_OPTIONS, and are only looked up when the
    chosen formula needs them.

    Raises InvalidValue for malformed input and UnsupportedConversion when
    the graph has no path from the source unit to the target.
    """
    parsed = split_unit_value(from_value)
    source = parsed.unit_suffix

    converters = CONVERTERS.get(source)
    if converters is None:
        logger.info("unsupported_source", value=from_value, source=source.value)
        raise UnsupportedConversion(source.value)

    target = _as_suffix(to_unit_suffix)
    converter = converters.get(target) if target is not None else None
    if converter is None:
        supported = tuple(s.value for s in supported_targets(source))
        target_text = to_unit_suffix.value if isinstance(to_unit_suffix, UnitSuffix) else str(to_unit_suffix)
        logger.info(
            "unsupported_target", value=from_value, source=source.value,
            target=target_text, supported=supported,
        )
        raise UnsupportedConversion(source.value, target_text, supported)

    result = converter(parsed.value, build_context(options, measurer))
    converted = format_unit_value(result, target)
    logger.debug("converted", value=from_value, target=target.value, result=converted)
    return converted
