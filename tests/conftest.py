import matplotlib

matplotlib.use("Agg")

import pytest

from hufftext.entropy import FrequencyTable


@pytest.fixture
def aaabbc_table():
    return FrequencyTable({"a": 3, "b": 2, "c": 1})
