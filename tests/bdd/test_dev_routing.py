"""Behaviour tests for development server routing.

These scenarios build a throwaway ``.devbuild`` directory, resolve request
paths through :class:`~unreact.server.DevPathResolver`, and check which file
(or fallback) answers each request.

Usage:
    Run these behaviour tests with pytest, for example:

        pytest tests/bdd/test_dev_routing.py -v

Prerequisites:
    - pytest-bdd installed via the ``test`` extra.
    - The feature file at ``features/dev_routing.feature``.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from unreact.server import DevPathResolver, Response

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "dev_routing.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("an empty dev build")
def given_empty_build(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Create an empty build directory."""
    root = tmp_path / ".devbuild"
    root.mkdir()
    scenario_state["root"] = root


@given(parsers.parse('a dev build containing "{relative}" with "{text}"'))
def given_build_file(
    tmp_path: Path, scenario_state: dict[str, object], relative: str, text: str
) -> None:
    """Create a build directory holding a single UTF-8 file."""
    root = tmp_path / ".devbuild"
    target = root / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    scenario_state["root"] = root


@when(parsers.parse('"{path}" is requested'))
def when_requested(scenario_state: dict[str, object], path: str) -> None:
    """Resolve ``path`` against the build directory."""
    root = scenario_state["root"]
    assert isinstance(root, Path)
    scenario_state["response"] = DevPathResolver(root).resolve(path)


@then(parsers.parse("the response status is {status:d}"))
def then_status(scenario_state: dict[str, object], status: int) -> None:
    """Check the response status code."""
    response = scenario_state["response"]
    assert isinstance(response, Response)
    assert response.status == status


@then(parsers.parse('the response body is "{body}"'))
def then_body(scenario_state: dict[str, object], body: str) -> None:
    """Check the response body text."""
    response = scenario_state["response"]
    assert isinstance(response, Response)
    assert response.body == body
