import pytest

from phototool.display_scale import (
    ProbeResult,
    ScaleResult,
    darwin_ci_surrogate,
    darwin_display_scaling,
    darwin_nocgo_display_scaling,
    darwin_tier_from_ui_pct,
    ui_probe_from_ratios,
    unsupported_display_scaling,
    windows_display_scaling,
)

NO_PROBE = ProbeResult(0, 0.0, 0.0, False, "CoreGraphics: invalid main display bounds")


def test_surrogate_requires_github_actions():
    env = {"GITHUB_ACTIONS": "", "PHOTO_TOOL_NFR07_MACOS_CI_TIER": "125"}
    assert darwin_ci_surrogate(env) is None


def test_surrogate_tier150():
    env = {"GITHUB_ACTIONS": "true", "PHOTO_TOOL_NFR07_MACOS_CI_TIER": "150"}
    assert darwin_ci_surrogate(env) == (150, "1.5")


def test_surrogate_unknown_tier():
    env = {"GITHUB_ACTIONS": "true", "PHOTO_TOOL_NFR07_MACOS_CI_TIER": "175"}
    assert darwin_ci_surrogate(env) is None


@pytest.mark.parametrize(
    "probe", [NO_PROBE, ui_probe_from_ratios([2.0])], ids=["no_probe", "probe_100"]
)
def test_display_scaling_macos_ci_surrogate(probe):
    env = {
        "GITHUB_ACTIONS": "true",
        "PHOTO_TOOL_NFR07_MACOS_CI_TIER": "125",
        "FYNE_SCALE": "1.25",
    }
    res = darwin_display_scaling(env, probe)
    assert res.ok and res.pct == 125
    assert "surrogate tier=125%" in res.detail
    assert "CoreGraphics" in res.detail

    env["FYNE_SCALE"] = "1.0"
    assert darwin_display_scaling(env, probe).ok is False


def test_nocgo_macos_ci_surrogate():
    env = {
        "GITHUB_ACTIONS": "true",
        "PHOTO_TOOL_NFR07_MACOS_CI_TIER": "125",
        "FYNE_SCALE": "1.25",
    }
    res = darwin_nocgo_display_scaling(env)
    assert res.ok and res.pct == 125
    assert "surrogate tier=125%" in res.detail
    assert "no CoreGraphics probe" in res.detail
    env["FYNE_SCALE"] = "1.0"
    bad = darwin_nocgo_display_scaling(env)
    assert not bad.ok
    assert '"1.25"' in bad.detail and '"1.0"' in bad.detail


def test_nocgo_without_surrogate():
    res = darwin_nocgo_display_scaling({})
    assert res == ScaleResult(0, res.detail, False)
    assert "without cgo" in res.detail


def test_surrogate_matching_probe_reported():
    env = {
        "GITHUB_ACTIONS": "true",
        "PHOTO_TOOL_NFR07_MACOS_CI_TIER": "150",
        "FYNE_SCALE": "1.5",
    }
    res = darwin_display_scaling(env, ui_probe_from_ratios([3.0]))
    assert res.ok and res.pct == 150
    assert "CoreGraphics matches NFR-07 tier 150%" in res.detail


def test_surrogate_other_tier_reported():
    env = {
        "GITHUB_ACTIONS": "true",
        "PHOTO_TOOL_NFR07_MACOS_CI_TIER": "150",
        "FYNE_SCALE": "1.5",
    }
    res = darwin_display_scaling(env, ui_probe_from_ratios([2.5]))
    assert res.pct == 150
    assert "CoreGraphics NFR-07 tier 125% (workflow tier=150%)" in res.detail


def test_probe_retina_halves_ratio():
    probe = ui_probe_from_ratios([2.0, 2.5, -1.0])
    assert probe.got
    assert probe.max_ratio == 2.5
    assert probe.ui == 1.25
    assert probe.ui_pct == 125
    assert probe.detail == (
        "CoreGraphics pixel/point max=2.500 uiScale=1.250 (~125% UI vs 1x baseline)"
    )


def test_probe_non_retina_keeps_ratio():
    probe = ui_probe_from_ratios([1.5])
    assert probe.ui == 1.5
    assert probe.ui_pct == 150


def test_probe_no_displays():
    probe = ui_probe_from_ratios([0.0])
    assert probe.got is False
    assert probe.detail


@pytest.mark.parametrize(
    "pct,tier",
    [(121, None), (122, 125), (128, 125), (129, None), (146, 150), (154, 150), (155, None)],
)
def test_tier_from_ui_pct(pct, tier):
    assert darwin_tier_from_ui_pct(pct) == tier


def test_darwin_without_surrogate_tiers():
    assert darwin_display_scaling({}, ui_probe_from_ratios([2.5])).pct == 125
    assert darwin_display_scaling({}, ui_probe_from_ratios([3.0])).ok is True
    res = darwin_display_scaling({}, ui_probe_from_ratios([2.0]))
    assert res.ok is False and res.pct == 100
    assert "AC3 requires" in res.detail
    missing = darwin_display_scaling({}, NO_PROBE)
    assert missing == ScaleResult(0, NO_PROBE.detail, False)


@pytest.mark.parametrize(
    "dpi,pct,ok", [(120, 125, True), (144, 150, True), (96, 100, False), (0, 0, False)]
)
def test_windows_display_scaling(dpi, pct, ok):
    res = windows_display_scaling(dpi)
    assert (res.pct, res.ok) == (pct, ok)


def test_windows_zero_dpi_detail():
    assert windows_display_scaling(0).detail == "GetDpiForSystem returned 0"


def test_unsupported():
    res = unsupported_display_scaling()
    assert res.ok is False and res.pct == 0
    assert "unsupported" in res.detail