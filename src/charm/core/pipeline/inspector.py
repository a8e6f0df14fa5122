from __future__ import annotations

"""
Inspection Pipeline.

Consumer side of the decoder: places every decode outcome in the stream
(running character count and byte offset), attaches the classifier's
display properties to valid characters and feeds the result to a sink
supplied by the interface layer.
"""

import logging
from typing import Any, Callable, Dict, Iterator

from charm.core.analysis.classifier import describe
from charm.core.decoding.decoder import Decoder
from charm.domain.char_models import ValidChar
from charm.domain.inspection_models import InspectedUnit, InspectionSummary

logger = logging.getLogger(__name__)

UnitSink = Callable[[InspectedUnit], None]

# -----------------------------------------------------------------------------
# STREAM INSPECTION
# -----------------------------------------------------------------------------

def inspect_stream(source: Any, *, count_bytes: bool = False) -> Iterator[InspectedUnit]:
    """
    Decode ``source`` and yield one InspectedUnit per outcome.

    Args:
        source: Any byte source accepted by the Decoder.
        count_bytes: Use the 0-based byte offset as the unit position
            instead of the 1-based unit count.

    Yields:
        InspectedUnit: Units in stream order.

    Raises:
        OSError: Propagated from the source; the generator is finished
            afterwards.
    """
    offset = 0
    index = 0
    for outcome in Decoder(source):
        index += 1
        info = describe(outcome.char) if isinstance(outcome, ValidChar) else None
        position = offset if count_bytes else index
        yield InspectedUnit(position=position, offset=offset, outcome=outcome, info=info)
        offset += outcome.length


def run_inspection(source: Any, config: Dict[str, Any], sink: UnitSink) -> InspectionSummary:
    """
    Inspect ``source`` to the end and hand every unit to ``sink``.

    An I/O error stops the inspection; it is logged and recorded in the
    returned summary instead of being raised. Units already delivered to
    the sink stay delivered.

    Args:
        source: Byte source to inspect.
        config: Validated configuration (``count_bytes`` is honoured here).
        sink: Callback receiving each unit, typically a renderer.

    Returns:
        InspectionSummary: Counters and final status.
    """
    summary = InspectionSummary()
    count_bytes = bool(config.get("count_bytes", False))

    units = inspect_stream(source, count_bytes=count_bytes)
    while True:
        # Only read failures are caught; sink errors belong to the caller
        try:
            unit = next(units)
        except StopIteration:
            break
        except OSError as e:
            logger.error(f"Read failed after {summary.byte_count} byte(s): {e}")
            summary.fail(str(e))
            return summary

        summary.record(unit)
        sink(unit)

    logger.debug(
        f"Inspection finished: {summary.units} unit(s), {summary.byte_count} byte(s), "
        f"{summary.invalid} invalid."
    )
    return summary
