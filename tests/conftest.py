import logging

import pytest

from utmups.transformer import CoordinateTransformer

logging.basicConfig()


@pytest.fixture(scope="session")
def transformer() -> CoordinateTransformer:
    return CoordinateTransformer()
