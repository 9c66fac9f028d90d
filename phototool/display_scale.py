"""Display-scale probes mapped to the 125% and 150% UI scaling tiers."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple

TIER_125 = 125
TIER_150 = 150

# GitHub Actions macOS runners cannot change display scaling; the workflow pins
# a tier and the matching FYNE_SCALE instead.
_CI_SURROGATE_TIERS = {
    "125": (TIER_125, "1.25"),
    "150": (TIER_150, "1.5"),
}

_RETINA_RATIO_THRESHOLD = 1.7


@dataclass(frozen=True)
class ScaleResult:
    """Effective UI scaling percent, a diagnostic line, and whether it meets a tier."""

    pct: int
    detail: str
    ok: bool


@dataclass(frozen=True)
class ProbeResult:
    """Pixel-to-point probe outcome; ``detail`` is non-empty whenever ``got`` is true."""

    ui_pct: int
    max_ratio: float
    ui: float
    got: bool
    detail: str


def _environ(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def _quote(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def darwin_ci_surrogate(env: Optional[Mapping[str, str]] = None) -> Optional[Tuple[int, str]]:
    """Return (tier, required FYNE_SCALE) for a pinned macOS CI job, else None."""
    environ = _environ(env)
    if environ.get("GITHUB_ACTIONS", "") != "true":
        return None
    return _CI_SURROGATE_TIERS.get(environ.get("PHOTO_TOOL_NFR07_MACOS_CI_TIER", ""))


def ui_probe_from_ratios(ratios: Iterable[float]) -> ProbeResult:
    """Derive the effective UI scale from pixel/point ratios of active displays.

    The largest ratio wins. On Retina (ratio >= 1.7) the UI scale is the ratio
    halved, so a 2.5x mode reads as about 125% against a 2x baseline.
    """
    valid = [r for r in ratios if r > 0]
    if not valid:
        return ProbeResult(0, 0.0, 0.0, False, "CoreGraphics: invalid main display bounds")
    max_ratio = max(valid)
    ui = max_ratio / 2.0 if max_ratio >= _RETINA_RATIO_THRESHOLD else max_ratio
    pct = int(ui * 100.0 + 0.5)
    summary = (
        f"CoreGraphics pixel/point max={max_ratio:.3f} uiScale={ui:.3f} "
        f"(~{pct}% UI vs 1x baseline)"
    )
    return ProbeResult(pct, max_ratio, ui, True, summary)


def darwin_tier_from_ui_pct(ui_pct: int) -> Optional[int]:
    """Map an effective UI percent to the 125% or 150% tier, or None."""
    if 122 <= ui_pct <= 128:
        return TIER_125
    if 146 <= ui_pct <= 154:
        return TIER_150
    return None


def darwin_display_scaling(
    env: Optional[Mapping[str, str]], probe: ProbeResult
) -> ScaleResult:
    """macOS scaling check given a display probe, honouring the CI surrogate."""
    environ = _environ(env)
    surrogate = darwin_ci_surrogate(environ)
    if surrogate is not None:
        tier, fyne_want = surrogate
        got = environ.get("FYNE_SCALE", "")
        if got != fyne_want:
            return ScaleResult(
                0,
                f"macOS CI AC3: tier {tier}% requires FYNE_SCALE={_quote(fyne_want)} "
                f"(got {_quote(got)}); {probe.detail}",
                False,
            )
        parts = [f"NFR-07 AC3 macOS CI: surrogate tier={tier}% FYNE_SCALE={fyne_want}"]
        if not probe.got:
            parts.append(f"; CoreGraphics unavailable ({probe.detail})")
            return ScaleResult(tier, "".join(parts), True)
        parts.append("; ")
        parts.append(probe.detail)
        cg_tier = darwin_tier_from_ui_pct(probe.ui_pct)
        if cg_tier is None:
            parts.append(
                f"; CoreGraphics ~{probe.ui_pct}% UI (runner observation; "
                f"workflow surrogate enforces NFR-07 {tier}% tier)"
            )
        elif cg_tier == tier:
            parts.append(f"; CoreGraphics matches NFR-07 tier {tier}%")
        else:
            parts.append(f"; CoreGraphics NFR-07 tier {cg_tier}% (workflow tier={tier}%)")
        return ScaleResult(tier, "".join(parts), True)

    if not probe.got:
        return ScaleResult(0, probe.detail, False)

    tier = darwin_tier_from_ui_pct(probe.ui_pct)
    if tier is not None:
        return ScaleResult(tier, f"macOS display {probe.detail} ({tier}% tier)", True)
    return ScaleResult(
        probe.ui_pct,
        f"macOS display {probe.detail} (AC3 requires ~125% or ~150% effective UI)",
        False,
    )


def darwin_nocgo_display_scaling(env: Optional[Mapping[str, str]] = None) -> ScaleResult:
    """macOS scaling check without a display probe: only the CI surrogate applies."""
    environ = _environ(env)
    surrogate = darwin_ci_surrogate(environ)
    if surrogate is not None:
        tier, fyne_want = surrogate
        got = environ.get("FYNE_SCALE", "")
        if got != fyne_want:
            return ScaleResult(
                0,
                f"macOS CI AC3: tier {tier}% requires FYNE_SCALE={_quote(fyne_want)} "
                f"(got {_quote(got)})",
                False,
            )
        return ScaleResult(
            tier,
            f"NFR-07 AC3 macOS CI: surrogate tier={tier}% FYNE_SCALE={fyne_want} "
            "(build without cgo — no CoreGraphics probe; runner cannot set Displays scaling)",
            True,
        )
    return ScaleResult(
        0,
        "darwin build without cgo cannot probe display scaling "
        "(enable CGO for NFR-07 AC3 on hardware)",
        False,
    )


def windows_display_scaling(dpi: int) -> ScaleResult:
    """Map Windows system DPI to a tier (120 DPI = 125%, 144 DPI = 150%)."""
    if dpi == 0:
        return ScaleResult(0, "GetDpiForSystem returned 0", False)
    if dpi == 120:
        return ScaleResult(TIER_125, f"windows system DPI={dpi} (125% tier)", True)
    if dpi == 144:
        return ScaleResult(TIER_150, f"windows system DPI={dpi} (150% tier)", True)
    pct = (dpi * 100 + 48) // 96
    return ScaleResult(
        pct,
        f"windows system DPI={dpi} (~{pct}% vs 96 DPI baseline; AC3 requires 120 or 144)",
        False,
    )


def unsupported_display_scaling() -> ScaleResult:
    """Result for platforms without a display-scale probe."""
    return ScaleResult(0, "unsupported GOOS for NFR-07 AC3 display-scale probe", False)