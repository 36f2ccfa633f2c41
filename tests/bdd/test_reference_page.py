"""Behaviour tests for rendering the filtered API reference page.

These pytest-bdd scenarios drive ``ApiReferenceGenerator`` through a config
file written to a temporary tree, then inspect the resulting HTML with
BeautifulSoup. The feature file ``reference_page.feature`` covers whitelist
filtering, the internal-member warning, navigation anchors, and graceful
handling of a missing archive directory.

Usage
-----
Run ``pytest tests/bdd/test_reference_page.py -v`` after installing the test
extra (``pip install -e .[test]``).
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from apidoc_pages._constants import INTERNAL_HEADING
from apidoc_pages.config import load_build_config
from apidoc_pages.generator import ApiReferenceGenerator

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "reference_page.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soup(scenario_state: dict[str, object]) -> BeautifulSoup:
    return typ.cast("BeautifulSoup", scenario_state["soup"])


@given("a reference project with public and internal members")
def given_reference_project(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write reference markdown with an internal member and a filtered class."""
    docs = tmp_path / "docs"
    archived = docs / "versions" / "v1.0.0"
    archived.mkdir(parents=True)
    (archived / "api.html").write_text("<html></html>", encoding="utf-8")
    (docs / "doc.md").write_text(
        "# Element\n## _state\nInternal.\n## width\nWidth.\n# Renderer\n## draw\n",
        encoding="utf-8",
    )
    scenario_state["root"] = tmp_path
    scenario_state["docs"] = docs


@given("a whitelist that includes only the Element class")
def given_whitelist(scenario_state: dict[str, object]) -> None:
    """Write a config that whitelists the Element class."""
    root = typ.cast("Path", scenario_state["root"])
    config_path = root / "apidoc.yaml"
    config_path.write_text(
        "source: docs/doc.md\n"
        "output: docs/api.html\n"
        "versions_dir: docs/versions\n"
        "filter:\n"
        "  mode: whitelist\n"
        "  include: [Element]\n",
        encoding="utf-8",
    )
    scenario_state["config_path"] = config_path


@given("the archived versions directory does not exist")
def given_no_archive(scenario_state: dict[str, object]) -> None:
    """Remove the archived versions tree."""
    docs = typ.cast("Path", scenario_state["docs"])
    archived = docs / "versions" / "v1.0.0"
    (archived / "api.html").unlink()
    archived.rmdir()
    (docs / "versions").rmdir()


@when("I generate the API reference page")
def when_generate(scenario_state: dict[str, object]) -> None:
    """Run the generator for the configured project."""
    config = load_build_config(typ.cast("Path", scenario_state["config_path"]))
    written = ApiReferenceGenerator(config).run()
    scenario_state["soup"] = BeautifulSoup(
        written.read_text(encoding="utf-8"), "html.parser"
    )


@then("the navigation lists only the Element class")
def then_nav_lists_element(scenario_state: dict[str, object]) -> None:
    """Only the whitelisted class appears in the sidebar."""
    labels = [link.get_text() for link in _soup(scenario_state).select(".nav-class")]
    assert labels == ["Element"], f"unexpected navigation classes: {labels!r}"


@then("the internal member follows the warning heading")
def then_internal_after_warning(scenario_state: dict[str, object]) -> None:
    """Public members come first and the warning precedes internals."""
    members = [
        link.get_text() for link in _soup(scenario_state).select(".nav-member")
    ]
    assert members == ["width", INTERNAL_HEADING, "_state"], (
        f"expected public, warning, internal order; got {members!r}"
    )


@then("every navigation link targets a rendered heading")
def then_links_resolve(scenario_state: dict[str, object]) -> None:
    """Sidebar hrefs match the ids assigned to rendered headings."""
    soup = _soup(scenario_state)
    ids = {tag.get("id") for tag in soup.select("main.content h1, main.content h2")}
    hrefs = [link["href"] for link in soup.select("#nav-content a")]
    assert all(href.removeprefix("#") in ids for href in hrefs), (
        f"navigation links {hrefs!r} do not all resolve within {ids!r}"
    )


@then("the page has no version selector")
def then_no_selector(scenario_state: dict[str, object]) -> None:
    """The version selector is omitted when nothing is archived."""
    soup = _soup(scenario_state)
    assert soup.select_one("#version-dropdown") is None
    assert soup.select_one("main.content h1") is not None, "page should render"
