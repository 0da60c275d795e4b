import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from xcomplex import Complex


@pytest.fixture
def c():
    return Complex(1.0, 2.0)


@pytest.fixture
def d():
    return Complex(3.0, 4.0)


@pytest.fixture
def close_figures():
    yield
    plt.close("all")
