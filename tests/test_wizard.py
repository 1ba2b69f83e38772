"""Tests for the interactive wizard (gogo.wizard).

Prompts are patched so the wizard runs without a terminal.

Covers:
- Answers are written back to the config
- Changing the type applies its preset; keeping it leaves flags alone
- Declining the final confirmation and Ctrl-C both cancel
- summarize() rows
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from gogo.config import ProjectType, config_for_type, default_config
from gogo.wizard import TOGGLE_SECTIONS, WizardCancelled, run_wizard, summarize

pytestmark = pytest.mark.unit

TOGGLE_COUNT = sum(len(toggles) for _, toggles in TOGGLE_SECTIONS)


def _text_answers(
    name="demo",
    module="example.com/demo",
    description="Demo tool",
    author="Jane Doe",
    license="Apache-2.0",
    project_type="default",
):
    return [name, module, description, author, license, project_type]


def _keep_defaults(*args, default=None, **kwargs):
    return default


class TestRunWizard:
    def test_answers_are_applied(self):
        config = default_config()
        with patch("gogo.wizard.Prompt.ask", side_effect=_text_answers()), \
             patch("gogo.wizard.Confirm.ask", side_effect=_keep_defaults):
            result = run_wizard(config)

        assert result is config
        assert config.name == "demo"
        assert config.module == "example.com/demo"
        assert config.description == "Demo tool"
        assert config.author == "Jane Doe"
        assert config.license == "Apache-2.0"
        assert config.type is ProjectType.DEFAULT

    def test_toggle_answers_are_applied(self):
        config = default_config()
        # All toggles off, then confirm generation.
        answers = [False] * TOGGLE_COUNT + [True]
        with patch("gogo.wizard.Prompt.ask", side_effect=_text_answers()), \
             patch("gogo.wizard.Confirm.ask", side_effect=answers):
            run_wizard(config)

        assert config.use_cmd is False
        assert config.create_readme is False
        assert config.use_github_actions is False

    def test_type_change_applies_preset(self):
        config = default_config()
        seen_defaults = {}

        def confirm(prompt, default=None, **kwargs):
            seen_defaults[prompt] = default
            return default

        with patch("gogo.wizard.Prompt.ask", side_effect=_text_answers(project_type="cli")), \
             patch("gogo.wizard.Confirm.ask", side_effect=confirm):
            run_wizard(config)

        assert config.type is ProjectType.CLI
        assert config.use_cobra is True
        assert config.use_viper is True
        assert seen_defaults["Include Cobra (CLI framework)?"] is True

    def test_same_type_keeps_adjusted_flags(self):
        config = config_for_type("cli")
        config.use_viper = False
        with patch("gogo.wizard.Prompt.ask", side_effect=_text_answers(project_type="cli")), \
             patch("gogo.wizard.Confirm.ask", side_effect=_keep_defaults):
            run_wizard(config)

        assert config.use_viper is False

    def test_declining_generation_cancels(self):
        answers = [True] * TOGGLE_COUNT + [False]
        with patch("gogo.wizard.Prompt.ask", side_effect=_text_answers()), \
             patch("gogo.wizard.Confirm.ask", side_effect=answers):
            with pytest.raises(WizardCancelled):
                run_wizard(default_config())

    @pytest.mark.parametrize("interrupt", [KeyboardInterrupt, EOFError])
    def test_interrupt_cancels(self, interrupt):
        with patch("gogo.wizard.Prompt.ask", side_effect=interrupt):
            with pytest.raises(WizardCancelled):
                run_wizard(default_config())

    def test_unknown_license_defaults_to_first_choice(self):
        config = default_config()
        config.license = "WTFPL"
        captured = {}

        def prompt(label, default=None, **kwargs):
            captured[label] = default
            return default

        with patch("gogo.wizard.Prompt.ask", side_effect=prompt), \
             patch("gogo.wizard.Confirm.ask", side_effect=_keep_defaults):
            run_wizard(config)

        assert captured["License"] == "MIT"


class TestSummarize:
    def test_rows(self):
        config = config_for_type("api")
        config.name = "svc"
        rows = summarize(config)
        assert rows["Project"] == "svc"
        assert rows["Type"] == "api"
        assert "Gin (HTTP framework)" in rows["Dependencies"]
        assert "Cobra" not in rows["Dependencies"]

    def test_empty_section_is_dash(self):
        rows = summarize(default_config())
        assert rows["Dependencies"] == "-"
