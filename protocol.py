#!/usr/bin/env python3
# protocol.py - Unlock message wire format
#
# One ASCII message per write, no length prefix or delimiter:
#   UNLOCK <r> <g> <b>     (each component formatted %.3f)

from geometry import DEFAULT_TINT

UNLOCK_TOKEN = b"UNLOCK"


def format_unlock(tint):
    r, g, b = tint
    return b"UNLOCK %.3f %.3f %.3f" % (r, g, b)


def parse_unlock(data):
    """
    Look for the unlock marker anywhere in data.

    Returns None when there is no marker. Otherwise returns the tint that
    follows the marker, or DEFAULT_TINT when the three floats do not parse.
    """
    pos = data.find(UNLOCK_TOKEN)
    if pos < 0:
        return None

    fields = data[pos + len(UNLOCK_TOKEN):].split()[:3]
    try:
        if len(fields) < 3:
            raise ValueError("missing color components")
        return tuple(float(f) for f in fields)
    except ValueError:
        return DEFAULT_TINT
