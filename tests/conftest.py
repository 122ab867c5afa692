import pytest

from minihtml.core.context import ValidationContext, ValidationRequest
from minihtml.core.engine import Engine, setup_default_pipeline
from minihtml.core.logging import configure_logging
from minihtml.rules.loader import clear_cache, get_ruleset


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    configure_logging(level="silent", force=True)


@pytest.fixture
def rules():
    clear_cache()
    return get_ruleset("default")


@pytest.fixture
def engine(rules):
    eng = Engine(rules=rules)
    setup_default_pipeline(eng)
    return eng


@pytest.fixture
def make_ctx(rules):
    """Build a fresh ValidationContext for a text snapshot."""

    def _make(text: str, uri: str = "file:///doc.mhtml", version: int = 1) -> ValidationContext:
        request = ValidationRequest(uri=uri, version=version, text=text)
        return ValidationContext.from_request(request, rules)

    return _make

