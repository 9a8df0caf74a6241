import io
import random
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import cribtutor
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from cribtutor.markup import parse_document  # noqa: E402
from cribtutor.quiz import Dialogue  # noqa: E402


SCENARIO_HTML = (
    "<p>The <em>European Union</em> and <em>United States</em> are "
    "<em>international</em> organisations.</p>"
)

SCENARIO_TEXT = "The European Union and United States are international organisations."


class ReversingRandom(random.Random):
    """Random source whose shuffle reverses, for predictable ordering."""

    def shuffle(self, x):
        x.reverse()


# Common test fixtures
@pytest.fixture
def scenario_html():
    """Return the two-countries cribsheet paragraph."""
    return SCENARIO_HTML


@pytest.fixture
def scenario_root():
    """Return the annotated tree of the scenario paragraph."""
    return parse_document(SCENARIO_HTML)


@pytest.fixture
def scenario_paragraph(scenario_root):
    """Return the <p> element of the scenario."""
    return scenario_root.parts[0].sub


@pytest.fixture
def rng():
    """Return a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def reversing_rng():
    """Return a random source whose shuffle reverses."""
    return ReversingRandom()


@pytest.fixture
def make_dialogue(rng):
    """Return a factory for dialogues scripted with response lines."""
    def _make(*responses: str):
        script = "".join(line + "\n" for line in responses)
        output = io.StringIO()
        dialogue = Dialogue(io.StringIO(script), output, rng)
        return dialogue, output
    return _make
