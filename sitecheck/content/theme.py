"""
Site theme.

Colours live in CSS custom properties so the dark theme is a plain attribute
swap on <html>. The utility classes (bg-background, text-muted, ...) resolve to
var(--name) and never to a literal colour.
"""

from typing import Dict

LIGHT_PALETTE: Dict[str, str] = {
    "--primary": "#0d9488",
    "--primary-dark": "#0b7c72",
    "--background": "#ffffff",
    "--text": "#333333",
    "--muted": "#6B7280",
    "--accent": "#F472B6",
    "--code-bg": "#F3F4F6",
    "--code-text": "#1F2937",
}

DARK_PALETTE: Dict[str, str] = {
    "--primary": "#2dd4bf",
    "--primary-dark": "#0d9488",
    "--background": "#0e1117",
    "--text": "#f0f0f0",
    "--muted": "#9CA3AF",
    "--accent": "#F472B6",
    "--code-bg": "#1a1a1a",
    "--code-text": "#f0f0f0",
}

THEME_SELECTORS = {
    ":root": LIGHT_PALETTE,
    '[data-theme="dark"]': DARK_PALETTE,
}


def theme_extension() -> Dict[str, Dict]:
    """The theme.extend block of the utility framework config."""
    return {
        "colors": {name[2:]: f"var({name})" for name in LIGHT_PALETTE},
        "fontFamily": {"sans": ['"Inter"', "sans-serif"]},
        "maxWidth": {"prose": "65ch"},
    }


def render_base_css() -> str:
    rules = []
    for selector, palette in THEME_SELECTORS.items():
        body = "\n".join(f"  {name}: {value};" for name, value in palette.items())
        rules.append(f"{selector} {{\n{body}\n}}")
    return "\n\n".join(rules) + "\n"
