import pytest

from phototool.loupe import loupe_rating_key_allowed, loupe_step_index


@pytest.mark.parametrize("asset_id,want", [(0, False), (-1, False), (1, True)])
def test_rating_key_allowed(asset_id, want):
    assert loupe_rating_key_allowed(asset_id) is want


@pytest.mark.parametrize(
    "idx,delta,want",
    [
        (0, -1, (0, False)),
        (0, 1, (1, True)),
        (2, 1, (2, False)),
        (2, -1, (1, True)),
        (1, 0, (1, False)),
    ],
)
def test_step_index_clamp_no_wrap(idx, delta, want):
    assert loupe_step_index(idx, delta, 3) == want


def test_step_index_empty_total():
    assert loupe_step_index(3, 1, 0) == (3, False)


@pytest.mark.parametrize(
    "idx,delta,want",
    [
        (10, -1, (1, True)),
        (10, 1, (2, False)),
        (-3, -1, (0, False)),
    ],
)
def test_step_index_clamps_out_of_bounds_start(idx, delta, want):
    assert loupe_step_index(idx, delta, 3) == want