import matplotlib
import pytest

from contrast_color import reset_default_picker
from contrast_color.color_difference import delta_e_cie2000
from contrast_color.picker import ENV_CACHE_SIZE, ENV_CANDIDATES, ENV_HEX_OUTPUT

matplotlib.use("Agg")


class CountingDistance:
    """CIEDE2000 wrapper that counts its calls."""

    def __init__(self):
        self.calls = 0

    def __call__(self, lab1, lab2):
        self.calls += 1
        return delta_e_cie2000(lab1, lab2)


@pytest.fixture
def counting_distance():
    return CountingDistance()


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch):
    for name in (ENV_CANDIDATES, ENV_HEX_OUTPUT, ENV_CACHE_SIZE):
        monkeypatch.delenv(name, raising=False)
    reset_default_picker()
    yield
    reset_default_picker()
