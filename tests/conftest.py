import pytest


@pytest.fixture
def some_data():
    return [
        {"id": "123", "name": "John", "age": 51},
        {"id": "111", "name": "Alfred", "age": 12},
        {"id": "98", "name": "Jon", "age": 31},
    ]
