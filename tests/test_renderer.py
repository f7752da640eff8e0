"""Tests for the terminal notification renderer."""

from __future__ import annotations

from detection import BuildTool
from notification import build_notification, choose_link, render


class TestRender:
    def test_unknown_has_no_links(self, tmp_path):
        output = render(build_notification(tmp_path, BuildTool.UNKNOWN))
        assert "Project Build Tool" in output
        assert "This is unknown project" in output
        assert "[1]" not in output
        assert "<a" not in output

    def test_single_link_is_numbered(self, tmp_path):
        output = render(build_notification(tmp_path, BuildTool.GRADLE))
        lines = output.split("\n")
        assert len(lines) == 3
        assert "This is Gradle project" in lines[1]
        assert "[1]" in lines[2]
        assert "build.gradle" in lines[2]

    def test_two_links_keep_order(self, tmp_path):
        output = render(build_notification(tmp_path, BuildTool.MAVEN_OR_GRADLE))
        assert output.index("[1]") < output.index("build.gradle") < output.index("[2]") < output.index("pom.xml")
        assert "\t" in output
        assert "<br>" not in output

    def test_icon_marker(self, tmp_path):
        assert "[M]" in render(build_notification(tmp_path, BuildTool.MAVEN))
        assert "[G]" in render(build_notification(tmp_path, BuildTool.GRADLE))
        assert "[?]" in render(build_notification(tmp_path, BuildTool.MAVEN_OR_GRADLE))


class TestChooseLink:
    def test_no_links_never_prompts(self, tmp_path):
        def fail(prompt):
            raise AssertionError("prompted")

        assert choose_link(build_notification(tmp_path, BuildTool.UNKNOWN), input_fn=fail) is None

    def test_choose_by_number(self, tmp_path):
        payload = build_notification(tmp_path, BuildTool.MAVEN_OR_GRADLE)
        assert choose_link(payload, input_fn=lambda prompt: "2") == "pom.xml"
        assert choose_link(payload, input_fn=lambda prompt: " 1 ") == "build.gradle"

    def test_skip(self, tmp_path):
        payload = build_notification(tmp_path, BuildTool.MAVEN)
        assert choose_link(payload, input_fn=lambda prompt: "") is None

    def test_reprompts_on_invalid_answer(self, tmp_path, capsys):
        payload = build_notification(tmp_path, BuildTool.MAVEN)
        answers = iter(["3", "abc", "\u00b2", "1"])
        assert choose_link(payload, input_fn=lambda prompt: next(answers)) == "pom.xml"
        assert capsys.readouterr().out.count("Please enter a number") == 3
