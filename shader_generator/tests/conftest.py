import pytest

from shader_generator.tests.fake_groq import FakeGroq, make_client


@pytest.fixture
def groq():
    return FakeGroq()


@pytest.fixture
def client(groq):
    return make_client(groq)
