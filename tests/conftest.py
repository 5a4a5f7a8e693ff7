"""Pytest configuration and fixtures."""

import os

import pytest
import yaml

from uilocator.config import parse_config, reset_settings
from uilocator.hal.implementations.accessibility import InMemoryTreeAccess, TreeNode

DEMO_CONFIG_YAML = """\
Demo:
  bundleId: com.example.demo
  elements:
    searchBox:
      role: AXTextField
      identifier: search
    playButton:
      role: AXButton
      label: Play
      matchType: exact
    lastMessage:
      role: AXScrollArea
      identifier: chatHistory
      children:
        - role: AXStaticText
          index: -1
    settingsButton:
      role: AXButton
      identifier: settings
"""


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings, unaffected by the host environment."""
    for key in list(os.environ):
        if key.upper().startswith("UILOCATOR_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def access():
    """Provide an in-memory tree-access backend."""
    return InMemoryTreeAccess()


@pytest.fixture
def demo_tree():
    """Build a small application tree.

    AXApplication "Demo"
      AXWindow "Demo Main"
        AXGroup #toolbar
          AXTextField #searchField "Search"
          AXButton #playButton "Play"
        AXScrollArea #chatHistory
          AXStaticText "hello"
          AXStaticText "world"
      AXWindow "Preferences"
        AXButton "Play all"
    """
    return TreeNode(
        role="AXApplication",
        label="Demo",
        children=[
            TreeNode(
                role="AXWindow",
                label="Demo Main",
                children=[
                    TreeNode(
                        role="AXGroup",
                        identifier="toolbar",
                        children=[
                            TreeNode(role="AXTextField", identifier="searchField", label="Search"),
                            TreeNode(role="AXButton", identifier="playButton", label="Play"),
                        ],
                    ),
                    TreeNode(
                        role="AXScrollArea",
                        identifier="chatHistory",
                        children=[
                            TreeNode(role="AXStaticText", label="hello"),
                            TreeNode(role="AXStaticText", label="world"),
                        ],
                    ),
                ],
            ),
            TreeNode(
                role="AXWindow",
                label="Preferences",
                children=[TreeNode(role="AXButton", label="Play all")],
            ),
        ],
    )


@pytest.fixture
def demo_config_data():
    """Parsed demo configuration document."""
    return yaml.safe_load(DEMO_CONFIG_YAML)


@pytest.fixture
def demo_model(demo_config_data):
    """ConfigurationModel for the demo application."""
    return parse_config(demo_config_data)


@pytest.fixture
def demo_config_file(tmp_path):
    """Write the demo configuration to a file."""
    path = tmp_path / "ui_config.yaml"
    path.write_text(DEMO_CONFIG_YAML, encoding="utf-8")
    return path


def chain_tree(depth: int) -> TreeNode:
    """Build a single-branch tree whose deepest node sits at ``depth``."""
    node = TreeNode(role="AXStaticText", label=f"level {depth}")
    for level in range(depth - 1, -1, -1):
        node = TreeNode(role="AXGroup", label=f"level {level}", children=[node])
    return node


@pytest.fixture
def make_chain():
    """Factory for single-branch trees of a given depth."""
    return chain_tree
