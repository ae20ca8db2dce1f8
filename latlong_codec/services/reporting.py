import logging
from typing import Iterable, Optional

from latlong_codec.models.coordinate import Advisory, AdvisoryKind

logger = logging.getLogger("latlong_codec")


def report_advisories(
    advisories: Iterable[Advisory], log: Optional[logging.Logger] = None
) -> int:
    """
    Send conversion advisories to a logger.

    Clamped inputs were recovered and are logged as warnings. Decoder
    advisories point at suspicious received data and are logged as errors.

    Args:
        advisories: Advisories attached to a conversion result
        log: Logger to use. Defaults to the "latlong_codec" logger.

    Returns:
        int: Number of advisories reported
    """
    log = log or logger
    count = 0
    for advisory in advisories:
        if advisory.kind == AdvisoryKind.CLAMPED:
            log.warning(advisory.message)
        else:
            log.error(f"Error: {advisory.message}")
        count += 1
    return count
