import pytest

from tomlquery.testing import tomlquery_config  # noqa: F401


@pytest.fixture(autouse=True)
def _restore_query_config(tomlquery_config) -> None:  # noqa: F811
    """Every test gets QUERY_CONFIG restored afterwards."""
