"""Tests for gitreview.prompts module."""

import logging

from gitreview.prompts import (
    BUILTIN_TEMPLATES,
    REVIEW_TEMPLATE_DEFAULT,
    REVIEW_TEMPLATE_PERFORMANCE,
    REVIEW_TEMPLATE_SECURITY,
    build_focus_instructions,
    build_ignore_instructions,
    build_prompt,
    list_templates,
    load_template,
)


class TestBuiltinTemplates:
    """Tests for the shipped templates."""

    def test_all_templates_have_placeholders(self):
        """Test that every template takes the diff and instruction blocks."""
        for name, template in BUILTIN_TEMPLATES.items():
            assert "{diff}" in template, name
            assert "{focus_instructions}" in template, name
            assert "{ignore_instructions}" in template, name


class TestLoadTemplate:
    """Tests for load_template function."""

    def test_default_when_none(self, temp_dir):
        """Test that no name loads the default template."""
        assert load_template(None, temp_dir) == REVIEW_TEMPLATE_DEFAULT

    def test_builtin_by_name(self, temp_dir):
        """Test loading built-in templates by name."""
        assert load_template("security", temp_dir) == REVIEW_TEMPLATE_SECURITY
        assert load_template("performance", temp_dir) == REVIEW_TEMPLATE_PERFORMANCE

    def test_unknown_falls_back_to_default(self, temp_dir, caplog):
        """Test that an unknown template logs a warning and uses the default."""
        with caplog.at_level(logging.WARNING, logger="gitreview"):
            template = load_template("nonexistent", temp_dir)

        assert template == REVIEW_TEMPLATE_DEFAULT
        assert "nonexistent" in caplog.text
        assert "Using default template" in caplog.text

    def test_user_template(self, temp_dir):
        """Test that ./prompts/<name>.txt is loaded."""
        (temp_dir / "api.txt").write_text("Check the API.\n{diff}")
        assert load_template("api", temp_dir) == "Check the API.\n{diff}"

    def test_user_template_overrides_builtin(self, temp_dir):
        """Test that a user file wins over a built-in template."""
        (temp_dir / "security.txt").write_text("Custom security\n{diff}")
        assert load_template("security", temp_dir) == "Custom security\n{diff}"

    def test_user_default_template(self, temp_dir):
        """Test that prompts/default.txt replaces the built-in default."""
        (temp_dir / "default.txt").write_text("My default\n{diff}")

        assert load_template(None, temp_dir) == "My default\n{diff}"
        assert load_template("missing", temp_dir) == "My default\n{diff}"

    def test_missing_templates_dir(self, temp_dir):
        """Test that a missing prompts directory is fine."""
        assert load_template("security", temp_dir / "nope") == REVIEW_TEMPLATE_SECURITY


class TestListTemplates:
    """Tests for list_templates function."""

    def test_builtins_only(self, temp_dir):
        """Test listing with no user templates."""
        assert list_templates(temp_dir) == ["default", "performance", "security"]

    def test_includes_user_templates(self, temp_dir):
        """Test that user templates are listed once."""
        (temp_dir / "api.txt").write_text("x")
        (temp_dir / "security.txt").write_text("x")
        (temp_dir / "notes.md").write_text("x")

        assert list_templates(temp_dir) == ["api", "default", "performance", "security"]


class TestInstructions:
    """Tests for focus and ignore instruction blocks."""

    def test_focus_empty(self):
        """Test that no focus areas produce nothing."""
        assert build_focus_instructions(None) == ""
        assert build_focus_instructions([]) == ""

    def test_focus_areas(self):
        """Test the focus block format."""
        assert build_focus_instructions(["security", "performance"]) == (
            "\nSpecifically focus on and prioritize these areas in your review:\n"
            "- security\n"
            "- performance"
        )

    def test_ignore_areas(self):
        """Test the ignore block format."""
        assert build_ignore_instructions(["style"]) == (
            "\nSkip or minimize attention to these areas unless critical:\n- style"
        )

    def test_ignore_empty(self):
        """Test that no ignore areas produce nothing."""
        assert build_ignore_instructions(None) == ""


class TestBuildPrompt:
    """Tests for build_prompt function."""

    def test_substitutes_everything(self, sample_diff):
        """Test that all placeholders are replaced."""
        prompt = build_prompt(REVIEW_TEMPLATE_DEFAULT, sample_diff, ["auth"], ["style"])

        assert sample_diff in prompt
        assert "- auth" in prompt
        assert "- style" in prompt
        assert "{diff}" not in prompt
        assert "{focus_instructions}" not in prompt
        assert "{ignore_instructions}" not in prompt

    def test_no_focus_or_ignore(self):
        """Test that empty blocks leave no trace."""
        prompt = build_prompt("A{focus_instructions}{ignore_instructions}B\n{diff}", "D")
        assert prompt == "AB\nD"

    def test_other_braces_untouched(self):
        """Test that JSON examples in templates survive."""
        template = 'Reply as {"issues": []}\n{diff}'
        assert build_prompt(template, "D") == 'Reply as {"issues": []}\nD'

    def test_diff_content_not_substituted(self):
        """Test that placeholders inside the diff are kept literally."""
        diff = '+msg = "{focus_instructions}"'
        prompt = build_prompt("{diff}", diff, ["auth"])
        assert prompt == diff
