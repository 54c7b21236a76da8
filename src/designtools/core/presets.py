"""Built-in shadow scales shipped by the supported styling frameworks."""

from __future__ import annotations

from typing import NamedTuple


class Preset(NamedTuple):
    name: str
    value: str


class DesignPreset(NamedTuple):
    name: str
    label: str
    value: str
    category: str


TAILWIND_SHADOW_PRESETS: tuple[Preset, ...] = (
    Preset("shadow-2xs", "0 1px rgb(0 0 0 / 0.05)"),
    Preset("shadow-xs", "0 1px 2px 0 rgb(0 0 0 / 0.05)"),
    Preset("shadow-sm", "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)"),
    Preset("shadow", "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)"),
    Preset("shadow-md", "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)"),
    Preset("shadow-lg", "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)"),
    Preset("shadow-xl", "0 25px 50px -12px rgb(0 0 0 / 0.25)"),
    Preset("shadow-2xl", "0 50px 100px -20px rgb(0 0 0 / 0.25)"),
    Preset("shadow-inner", "inset 0 2px 4px 0 rgb(0 0 0 / 0.05)"),
    Preset("shadow-none", "none"),
)

BOOTSTRAP_SHADOW_PRESETS: tuple[Preset, ...] = (
    Preset("box-shadow-sm", "0 0.125rem 0.25rem rgba(0, 0, 0, 0.075)"),
    Preset("box-shadow", "0 0.5rem 1rem rgba(0, 0, 0, 0.15)"),
    Preset("box-shadow-lg", "0 1rem 3rem rgba(0, 0, 0, 0.175)"),
    Preset("box-shadow-inset", "inset 0 1px 2px rgba(0, 0, 0, 0.075)"),
)

# Starting points offered by the editor when creating a new shadow.
DESIGN_PRESETS: tuple[DesignPreset, ...] = (
    DesignPreset("soft-sm", "Soft Small", "0 1px 2px 0 rgb(0 0 0 / 0.03), 0 1px 3px 0 rgb(0 0 0 / 0.06)", "subtle"),
    DesignPreset("soft-md", "Soft Medium", "0 2px 8px -2px rgb(0 0 0 / 0.05), 0 4px 12px -2px rgb(0 0 0 / 0.08)", "subtle"),
    DesignPreset("soft-lg", "Soft Large", "0 4px 16px -4px rgb(0 0 0 / 0.08), 0 8px 24px -4px rgb(0 0 0 / 0.1)", "subtle"),
    DesignPreset("card", "Card", "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)", "medium"),
    DesignPreset("dropdown", "Dropdown", "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)", "medium"),
    DesignPreset("modal", "Modal", "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)", "medium"),
    DesignPreset("elevated", "Elevated", "0 25px 50px -12px rgb(0 0 0 / 0.25)", "dramatic"),
    DesignPreset("floating", "Floating", "0 20px 60px -15px rgb(0 0 0 / 0.3)", "dramatic"),
    DesignPreset("deep", "Deep", "0 30px 60px -10px rgb(0 0 0 / 0.2), 0 18px 36px -18px rgb(0 0 0 / 0.15)", "dramatic"),
    DesignPreset(
        "layered-sm",
        "Layered Small",
        "0 1px 1px rgb(0 0 0 / 0.04), 0 2px 2px rgb(0 0 0 / 0.04), 0 4px 4px rgb(0 0 0 / 0.04)",
        "layered",
    ),
    DesignPreset(
        "layered-md",
        "Layered Medium",
        "0 1px 1px rgb(0 0 0 / 0.03), 0 2px 2px rgb(0 0 0 / 0.03), 0 4px 4px rgb(0 0 0 / 0.03), "
        "0 8px 8px rgb(0 0 0 / 0.03), 0 16px 16px rgb(0 0 0 / 0.03)",
        "layered",
    ),
    DesignPreset(
        "layered-lg",
        "Layered Large",
        "0 1px 2px rgb(0 0 0 / 0.02), 0 2px 4px rgb(0 0 0 / 0.02), 0 4px 8px rgb(0 0 0 / 0.03), "
        "0 8px 16px rgb(0 0 0 / 0.04), 0 16px 32px rgb(0 0 0 / 0.05), 0 32px 64px rgb(0 0 0 / 0.06)",
        "layered",
    ),
    DesignPreset("blue-glow", "Blue Glow", "0 4px 14px 0 rgb(59 130 246 / 0.3)", "colored"),
    DesignPreset("purple-glow", "Purple Glow", "0 4px 14px 0 rgb(147 51 234 / 0.3)", "colored"),
    DesignPreset("green-glow", "Green Glow", "0 4px 14px 0 rgb(34 197 94 / 0.3)", "colored"),
)


def framework_presets(styling: str | None) -> tuple[Preset, ...]:
    if styling == "tailwind":
        return TAILWIND_SHADOW_PRESETS
    if styling == "bootstrap":
        return BOOTSTRAP_SHADOW_PRESETS
    return ()
