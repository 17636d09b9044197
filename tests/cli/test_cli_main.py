"""Tests for the Typer CLI."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from fakenews_detector import __version__
from fakenews_detector.cli import main as cli_main
from fakenews_detector.cli.main import app
from fakenews_detector.sentiment import set_sentiment_classifier

runner = CliRunner()

SOURCED_TEXT = (
    "According to a study published in a peer-reviewed journal, researchers at a "
    "university found a 12% increase, reported by Reuters."
)
CLICKBAIT_TEXT = "SHOCKING!! You won't believe this amazing secret they don't want you to know!!!"


class TestAnalyzeCommand:
    """Tests for `analyze`."""

    def test_json_report(self):
        result = runner.invoke(app, ["analyze", SOURCED_TEXT, "--json"])

        assert result.exit_code == 0, result.output
        report = json.loads(result.stdout)
        assert report["credibilityScore"] == 77
        assert report["classification"] == "trustworthy"
        assert report["factors"]["sourceReliability"] == 100
        assert report["factors"]["sentimentAnalysis"] == 50
        assert report["riskFactors"] == []
        assert report["usedFallback"] is False

    def test_dashboard(self, negative_classifier):
        set_sentiment_classifier(negative_classifier)

        result = runner.invoke(app, ["analyze", CLICKBAIT_TEXT, "--no-progress"])

        assert result.exit_code == 0, result.output
        assert "Misleading" in result.output
        assert "37/100" in result.output
        assert "Analysis Breakdown" in result.output
        assert "Clickbait-style" in result.output
        assert "Text classified as misleading" in result.output

    def test_read_from_file(self, tmp_path):
        path = tmp_path / "post.txt"
        path.write_text(SOURCED_TEXT, encoding="utf-8")

        result = runner.invoke(app, ["analyze", "--file", str(path), "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["classification"] == "trustworthy"

    def test_prompts_when_no_text(self):
        result = runner.invoke(app, ["analyze", "--json"], input=SOURCED_TEXT + "\n")

        assert result.exit_code == 0, result.output
        assert '"credibilityScore": 77' in result.stdout

    def test_prompt_goes_to_stderr(self):
        """Prompt text must not mix with a JSON report on stdout."""
        with patch.object(cli_main.typer, "prompt", return_value=SOURCED_TEXT) as prompt:
            result = runner.invoke(app, ["analyze", "--json"])

        assert result.exit_code == 0, result.output
        assert prompt.call_args.kwargs["err"] is True
        assert json.loads(result.stdout)["credibilityScore"] == 77

    @pytest.mark.parametrize("text", ["", "   "])
    def test_empty_text_rejected(self, text):
        result = runner.invoke(app, ["analyze", text, "--no-progress"])

        assert result.exit_code == 1
        assert "Please enter some text to analyze" in result.output

    def test_fallback_marked(self, failing_classifier):
        set_sentiment_classifier(failing_classifier)

        result = runner.invoke(app, ["analyze", "Is this real? Wow! Really?", "--json"])

        assert result.exit_code == 0, result.output
        report = json.loads(result.stdout)
        assert report["usedFallback"] is True
        assert report["credibilityScore"] == 58
        assert report["confidenceLevel"] == 75


class TestInfoCommands:
    """Tests for `rules`, `status` and `version`."""

    def test_rules(self):
        result = runner.invoke(app, ["rules"])

        assert result.exit_code == 0
        assert "clickbait" in result.output
        assert "bombshell" in result.output
        assert "+15" in result.output

    def test_status(self):
        result = runner.invoke(app, ["status"])

        assert result.exit_code == 0
        assert "Sentiment Model" in result.output

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
