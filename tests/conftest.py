import pytest


@pytest.fixture
def approach_coords():
    # Heading north along -105.0; only (40.0, -105.0) is within 10m of the end start.
    return [
        (39.9991, -105.0),
        (39.9994, -105.0),
        (39.9997, -105.0),
        (40.0, -105.0),
        (40.0003, -105.0),
    ]


@pytest.fixture
def end_coords():
    return [
        (40.00005, -105.00005),
        (40.0004, -105.0001),
        (40.0008, -105.0002),
    ]
