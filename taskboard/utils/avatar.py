# taskboard/utils/avatar.py
"""
Deterministic avatars generated from a username
"""

import base64
import html


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= (1 << 31) else value


def _utf16_units(text: str):
    data = text.encode("utf-16-le")
    for i in range(0, len(data), 2):
        yield int.from_bytes(data[i:i + 2], "little")


def string_to_color(text: str) -> str:
    """Hash a string to a ``#rrggbb`` colour, matching the web client's hash"""
    value = 0
    for unit in _utf16_units(text):
        value = unit + (_to_int32(_to_int32(value) << 5) - value)

    color = "#"
    for i in range(3):
        component = (_to_int32(value) >> (i * 8)) & 0xFF
        color += f"{component:02x}"
    return color


def generate_avatar(username: str) -> str:
    """Return an SVG data URI showing the username's initial on its colour"""
    first_letter = html.escape(username[:1].upper())
    bg_color = string_to_color(username)

    svg = f"""
        <svg width="128" height="128" viewBox="0 0 128 128" xmlns="http://www.w3.org/2000/svg">
            <rect width="128" height="128" fill="{bg_color}" />
            <text x="50%" y="50%" dominant-baseline="central" text-anchor="middle" font-family="Arial, sans-serif" font-size="64" fill="#ffffff">
                {first_letter}
            </text>
        </svg>
    """
    encoded = base64.b64encode(svg.encode("utf-8")).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"
