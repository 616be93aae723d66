"""Tests for the command-line interface."""

import json

import pytest

from research_trends.cli import create_parser, main


def run(capsys, *argv):
    code = main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


class TestParser:
    """Test cases for argument parsing."""

    def test_defaults(self):
        args = create_parser().parse_args(["trends"])
        assert args.command == "trends"
        assert args.group_by == "month"
        assert args.metric == "count"

    def test_invalid_choice_exits(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["trends", "--group-by", "week"])


class TestCommands:
    """Test cases for each subcommand."""

    def test_no_command(self, capsys):
        code, out, _ = run(capsys)
        assert code == 1
        assert "usage" in out.lower()

    def test_search(self, capsys, corpus_file):
        code, out, _ = run(capsys, "search", "--data", str(corpus_file), "--tags", "memory,safety")
        assert code == 0
        data = json.loads(out)
        assert data["total"] == 2
        assert [p["id"] for p in data["papers"]] == ["s2", "s6"]

    def test_trends(self, capsys, corpus_file):
        code, out, _ = run(
            capsys, "trends", "--data", str(corpus_file), "--group-by", "year", "--metric", "citations",
        )
        assert code == 0
        assert json.loads(out) == {
            "data": [
                {"period": "2023", "value": 160},
                {"period": "2024", "value": 18},
                {"period": "2025", "value": 10},
            ],
            "metric": "citations",
            "group_by": "year",
        }

    def test_tags(self, capsys, corpus_file):
        code, out, _ = run(capsys, "tags", "--data", str(corpus_file), "--top-n", "2")
        assert code == 0
        data = json.loads(out)
        assert data["distribution"] == [{"tag": "agents", "count": 4}, {"tag": "planning", "count": 2}]
        assert data["group_by"] == "month"

    def test_cooccurrence(self, capsys, corpus_file):
        code, out, _ = run(capsys, "cooccurrence", "--data", str(corpus_file), "--type", "methods", "--min", "1")
        assert code == 0
        data = json.loads(out)
        assert data["type"] == "methods"
        assert len(data["links"]) == 2

    def test_similar(self, capsys, corpus_file):
        code, out, _ = run(capsys, "similar", "--data", str(corpus_file), "--id", "s1", "--top-n", "1")
        assert code == 0
        data = json.loads(out)
        assert data["source"]["id"] == "s1"
        assert data["similar"][0]["paper"]["id"] == "s3"

    def test_similar_unknown_id(self, capsys, corpus_file):
        code, _, err = run(capsys, "similar", "--data", str(corpus_file), "--id", "nope")
        assert code == 1
        assert "paper not found: nope" in err

    def test_insights(self, capsys, corpus_file):
        code, out, _ = run(capsys, "insights", "--data", str(corpus_file))
        assert code == 0
        insights = json.loads(out)
        assert 0 < len(insights) <= 5

    def test_predict(self, capsys, corpus_file):
        code, out, _ = run(capsys, "predict", "--data", str(corpus_file))
        assert code == 0
        assert json.loads(out)[0]["direction"] == "agents"

    def test_advise(self, capsys, corpus_file):
        code, out, _ = run(capsys, "advise", "--data", str(corpus_file), "--tags", "agents")
        assert code == 0
        assert json.loads(out)["tag_paper_count"] == 4

    def test_advise_not_enough_papers(self, capsys, corpus_file):
        code, out, err = run(capsys, "advise", "--data", str(corpus_file), "--tags", "safety")
        assert code == 0
        assert json.loads(out) is None
        assert "at least 3" in err

    def test_advise_requires_tags(self, capsys, corpus_file):
        code, _, err = run(capsys, "advise", "--data", str(corpus_file))
        assert code == 1
        assert "--tags is required" in err

    def test_analyze_and_report(self, capsys, corpus_file, tmp_path):
        """Test the analyze then report workflow."""
        output = tmp_path / "out"
        code, out, _ = run(
            capsys, "analyze", "--data", str(corpus_file), "--output", str(output),
            "--group-by", "year", "--selected-tags", "agents",
        )
        assert code == 0
        assert "Loaded 6 papers (6 after filters)" in out
        assert (output / "analysis" / "advice_analysis.json").exists()

        report_file = tmp_path / "report.md"
        code, out, _ = run(
            capsys, "report", "--input", str(output), "--format", "markdown", "--output", str(report_file),
        )
        assert code == 0
        assert report_file.read_text(encoding="utf-8").startswith("# Research Trends Report")

    def test_report_to_stdout(self, capsys, tmp_path):
        code, out, _ = run(capsys, "report", "--input", str(tmp_path), "--format", "html")
        assert code == 0
        assert "<h1>Research Trends Report</h1>" in out

    def test_errors_are_reported(self, capsys, monkeypatch, corpus_file):
        """Test that unexpected exceptions become exit code 1."""
        import research_trends.cli as cli

        def boom(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(cli.InsightGenerator, "generate_insights", boom)
        code, _, err = run(capsys, "insights", "--data", str(corpus_file))
        assert code == 1
        assert "Error: boom" in err

    def test_keyboard_interrupt(self, capsys, monkeypatch, corpus_file):
        import research_trends.cli as cli

        def interrupt(*args, **kwargs):
            raise KeyboardInterrupt

        monkeypatch.setattr(cli.TrendPredictor, "predict", interrupt)
        code, _, _ = run(capsys, "predict", "--data", str(corpus_file))
        assert code == 130

    def test_invalid_log_level(self, capsys, monkeypatch, corpus_file):
        """Test that a bad log level setting is reported, not raised."""
        import research_trends.cli as cli

        monkeypatch.setattr(cli.config, "LOG_LEVEL", "FOO")
        code, _, err = run(capsys, "insights", "--data", str(corpus_file))
        assert code == 1
        assert "Error: unknown log level: FOO" in err
