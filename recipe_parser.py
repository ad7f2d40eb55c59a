from datetime import timedelta

from constants import FRACTIONS, ISO_DURATION_RE

SECONDS_PER_UNIT = {
    3: 24 * 60 * 60,  # days
    4: 60 * 60,       # hours
    5: 60,            # minutes
    6: 1,             # seconds, may carry a fraction
}


def parse_iso_duration(iso_duration: str) -> timedelta:
    """Parse the date-time subset of ISO-8601 durations used by the export.

    ``T`` is mandatory, so ``P1DT`` is accepted and ``P1D`` is not.
    Raises ``ValueError`` when the text does not match.
    """
    m = ISO_DURATION_RE.match(iso_duration)
    if not m:
        raise ValueError(f"Invalid ISO-8601 duration: {iso_duration!r}")

    seconds = 0.0
    for group, factor in SECONDS_PER_UNIT.items():
        value = m.group(group)
        if value:
            seconds += float(value) * factor
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        raise ValueError(f"Duration out of range: {iso_duration!r}")


def convert_fractions(text: str) -> str:
    # No spacing is added, so "1½" becomes "11/2"
    return "".join(FRACTIONS.get(ch, ch) for ch in text)


def _decimal(whole: int, fraction: int, digits: int) -> str:
    if not fraction:
        return str(whole)
    return f"{whole}.{fraction:0{digits}d}".rstrip("0")


def format_duration(span: timedelta) -> str:
    """Render a span the short way: ``50s``, ``1h30m0s``, ``26h0m0s``, ``500ms``."""
    micros = span // timedelta(microseconds=1)
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)

    if micros < 1000:
        return f"{sign}{micros}µs"
    if micros < 1_000_000:
        return f"{sign}{_decimal(micros // 1000, micros % 1000, 3)}ms"

    hours, micros = divmod(micros, 3_600_000_000)
    minutes, micros = divmod(micros, 60_000_000)
    seconds = _decimal(micros // 1_000_000, micros % 1_000_000, 6) + "s"
    if hours:
        return f"{sign}{hours}h{minutes}m{seconds}"
    if minutes:
        return f"{sign}{minutes}m{seconds}"
    return f"{sign}{seconds}"
