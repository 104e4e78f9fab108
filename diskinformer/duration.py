"""
Textual duration literals as used in cluster config documents, e.g. "30s", "1m0s", "1h30m", "1.5ms"
"""
import re
from datetime import timedelta

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

MAX_NANOSECONDS = (1 << 63) - 1

UNITS = {
    'ns': NANOSECOND,
    'us': MICROSECOND,
    'µs': MICROSECOND,  # micro sign
    'μs': MICROSECOND,  # greek small letter mu
    'ms': MILLISECOND,
    's': SECOND,
    'm': MINUTE,
    'h': HOUR,
}

_COMPONENT = re.compile(r'([0-9]*)(?:\.([0-9]*))?([^0-9.]*)')


def _to_timedelta(nanoseconds):
    sign = -1 if nanoseconds < 0 else 1
    return sign * timedelta(microseconds=abs(nanoseconds) // MICROSECOND)


def _to_nanoseconds(value):
    return (value // timedelta(microseconds=1)) * MICROSECOND


MAX_DURATION = _to_timedelta(MAX_NANOSECONDS)


def parse_duration(text):
    """
    Parses a duration literal into a timedelta

    A literal is an optionally signed sequence of decimal numbers, each with an optional fraction
    and a unit suffix, such as "300ms", "-1.5h" or "2h45m". Sub-microsecond precision is truncated.

    :param text: the literal
    :return: timedelta
    :raises ValueError: the literal is empty, has a missing or unknown unit, or overflows
    """
    original = text
    negative = False
    if text and text[0] in '+-':
        negative = text[0] == '-'
        text = text[1:]
    if text == '0':
        return timedelta(0)
    if not text:
        raise ValueError(f'invalid duration {original!r}')

    total = 0
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        whole, fraction, unit = match.groups()
        if not whole and not fraction:
            raise ValueError(f'invalid duration {original!r}')
        if not unit:
            raise ValueError(f'missing unit in duration {original!r}')
        if unit not in UNITS:
            raise ValueError(f'unknown unit {unit!r} in duration {original!r}')
        scale = UNITS[unit]
        total += int(whole or 0) * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        if total > MAX_NANOSECONDS:
            raise ValueError(f'invalid duration {original!r}')
        pos = match.end()

    return _to_timedelta(-total if negative else total)


def _format_fraction(value, precision):
    whole, remainder = divmod(value, 10 ** precision)
    if not remainder:
        return whole, ''
    return whole, '.' + str(remainder).rjust(precision, '0').rstrip('0')


def format_duration(value):
    """
    Renders a timedelta as a duration literal: "0s", "1.5ms", "30s", "1m0s", "1h0m0s"
    """
    nanoseconds = _to_nanoseconds(value)
    sign = '-' if nanoseconds < 0 else ''
    nanoseconds = abs(nanoseconds)

    if nanoseconds == 0:
        return '0s'

    if nanoseconds < SECOND:
        if nanoseconds < MICROSECOND:
            unit, precision = 'ns', 0
        elif nanoseconds < MILLISECOND:
            unit, precision = 'µs', 3
        else:
            unit, precision = 'ms', 6
        whole, fraction = _format_fraction(nanoseconds, precision)
        return f'{sign}{whole}{fraction}{unit}'

    seconds, fraction = _format_fraction(nanoseconds, 9)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    out = f'{seconds}{fraction}s'
    if minutes or hours:
        out = f'{minutes}m{out}'
    if hours:
        out = f'{hours}h{out}'
    return f'{sign}{out}'
