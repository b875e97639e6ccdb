"""Behaviour tests for heading anchors and the table of contents.

These pytest-bdd scenarios load a YAML renderer configuration, render a guide
with a repeated section heading, and check the anchor ids, permalinks, and the
deduplicated table of contents, both through the Python API and through the
``anchordown toc`` command.

Usage
-----
Run ``pytest tests/bdd/test_heading_anchors.py -v``. The scenarios drive
``heading_anchors.feature``, write their inputs under ``tmp_path``, and share
data through the ``scenario_state`` fixture.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from anchordown import cli
from anchordown.config import load_renderer_config
from anchordown.renderer import RenderResult, render_markdown

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "heading_anchors.feature"
)
scenarios(FEATURE_FILE)

GUIDE = (
    "# Guide\n\n"
    "## Setup\n\nInstall the package.\n\n"
    "## Usage Notes\n\nRun the command.\n\n"
    "### Options\n\nPass flags.\n\n"
    "## Setup\n\nAgain, for another platform.\n"
)
EXPECTED_TOC = [
    {"slug": "doc-setup", "text": "Setup"},
    {"slug": "doc-usage-notes", "text": "Usage Notes"},
    {"slug": "doc-options", "text": "Options"},
]


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given('a renderer config with the table of contents and id prefix "doc-"')
def given_config(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write a renderer config enabling the table of contents."""
    config_path = tmp_path / "anchordown.yaml"
    config_path.write_text(
        """
host_link: https://site.test/
table_of_contents: true
id_prefix: doc-
headings: [h2, h3]
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    scenario_state["config_path"] = config_path


@given("a guide written to disk")
def given_guide(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write the sample guide next to the config."""
    guide_path = tmp_path / "guide.md"
    guide_path.write_text(GUIDE, encoding="utf-8")
    scenario_state["guide_path"] = guide_path


@when('I render a guide with a repeated "Setup" section')
def when_render_guide(scenario_state: dict[str, object]) -> None:
    """Render the guide with the loaded configuration."""
    config = load_renderer_config(typ.cast("Path", scenario_state["config_path"]))
    scenario_state["result"] = render_markdown(GUIDE, config)


@when("I run the toc command on the guide")
def when_run_toc(
    scenario_state: dict[str, object], capsys: pytest.CaptureFixture[str]
) -> None:
    """Invoke the toc command and capture its output."""
    cli.toc(
        typ.cast("Path", scenario_state["guide_path"]),
        config=typ.cast("Path", scenario_state["config_path"]),
    )
    scenario_state["stdout"] = capsys.readouterr().out


@then("every h2 heading carries an id and a permalink")
def then_headings_anchored(scenario_state: dict[str, object]) -> None:
    """Verify ids and permalinks on every h2 heading."""
    result = typ.cast("RenderResult", scenario_state["result"])
    soup = BeautifulSoup(result.html, "html.parser")
    headings = soup.find_all("h2")
    assert [h2["id"] for h2 in headings] == [
        "doc-setup",
        "doc-usage-notes",
        "doc-setup",
    ]
    for heading in headings:
        permalink = heading.find("a", class_="anchor-link")
        assert permalink is not None, f"missing permalink in {heading}"
        assert permalink["href"] == f"#{heading['id']}"
    title = soup.find("h1")
    assert title is not None
    assert not title.has_attr("id"), "h1 is not configured for anchors"


@then("the table of contents lists each slug once in document order")
def then_toc_deduplicated(scenario_state: dict[str, object]) -> None:
    """Verify the rendered table of contents."""
    result = typ.cast("RenderResult", scenario_state["result"])
    assert result.toc_items() == EXPECTED_TOC


@then("the printed JSON lists each slug once in document order")
def then_printed_toc(scenario_state: dict[str, object]) -> None:
    """Verify the JSON printed by the toc command."""
    printed = json.loads(typ.cast("str", scenario_state["stdout"]))
    assert printed == EXPECTED_TOC
