import pytest

from d20roll.config import get_settings


class ScriptedRng:
    """Random source that hands out a fixed sequence of faces."""

    def __init__(self, faces):
        self.faces = list(faces)
        self.calls = []

    def randint(self, a, b):
        face = self.faces.pop(0)
        assert a <= face <= b, f"scripted face {face} outside [{a}, {b}]"
        self.calls.append((a, b))
        return face


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
