#!/usr/bin/env python3
"""
Research Trends CLI
===================

Command-line interface for the research trend analytics engine.

Usage:
    research-trends search [options]
    research-trends trends [options]
    research-trends tags [options]
    research-trends cooccurrence [options]
    research-trends similar --id PAPER_ID
    research-trends insights [options]
    research-trends predict [options]
    research-trends advise --tags TAG[,TAG...]
    research-trends analyze [options]
    research-trends report --input DIR
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional

from research_trends import __version__, config
from research_trends.analyzer import ResearchAnalyzer
from research_trends.analyzers import (
    InsightGenerator,
    NetworkAnalyzer,
    ResearchAdvisor,
    SimilarityFinder,
    TrendAnalyzer,
    TrendPredictor,
    filter_papers,
)
from research_trends.models import COOCCURRENCE_TYPES, GROUP_BY_VALUES, METRIC_VALUES, json_default
from research_trends.query import parse_csv
from research_trends.store import PaperStore


def _add_data_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--data", "-d",
        type=str,
        default=str(config.DATA_PATH),
        help=f"Paper corpus JSON file (default: {config.DATA_PATH})"
    )


def _add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--q", "-q", type=str, default=None, help="Text search over title, abstract, authors, tags, methods")
    parser.add_argument("--tags", "-t", type=str, default=None, help="Comma-separated tags (match any)")
    parser.add_argument("--methods", "-m", type=str, default=None, help="Comma-separated methods (match any)")
    parser.add_argument("--year-from", type=int, default=None, help="First year (inclusive)")
    parser.add_argument("--year-to", type=int, default=None, help="Last year (inclusive)")


def _add_group_by_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--group-by", "-g",
        choices=GROUP_BY_VALUES,
        default="month",
        help="Time bucket (default: month)"
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="research-trends",
        description="Research Trends - analytics over a corpus of academic papers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Papers per year for two tags
  research-trends trends --group-by year --tags "multi-agent,planning"

  # Method co-occurrence network
  research-trends cooccurrence --type methods --min 3

  # Advice for a topic
  research-trends advise --tags "tool use"

  # Full analysis + report
  research-trends analyze --output my_analysis --selected-tags "tool use"
  research-trends report --input my_analysis --format markdown
        """
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser("search", help="Filter and list papers")
    _add_data_argument(search_parser)
    _add_filter_arguments(search_parser)

    trends_parser = subparsers.add_parser("trends", help="Paper count or citations over time")
    _add_data_argument(trends_parser)
    _add_filter_arguments(trends_parser)
    _add_group_by_argument(trends_parser)
    trends_parser.add_argument(
        "--metric",
        choices=METRIC_VALUES,
        default="count",
        help="Value per period (default: count)"
    )

    tags_parser = subparsers.add_parser("tags", help="Tag distribution and tag time series")
    _add_data_argument(tags_parser)
    _add_filter_arguments(tags_parser)
    _add_group_by_argument(tags_parser)
    tags_parser.add_argument("--top-n", type=int, default=TrendAnalyzer.DEFAULT_TOP_TAGS, help="Number of top tags")

    coocc_parser = subparsers.add_parser("cooccurrence", help="Tag or method co-occurrence network")
    _add_data_argument(coocc_parser)
    _add_filter_arguments(coocc_parser)
    coocc_parser.add_argument("--type", choices=COOCCURRENCE_TYPES, default="tags", help="Field to pair (default: tags)")
    coocc_parser.add_argument("--min", type=int, default=NetworkAnalyzer.DEFAULT_MIN_COUNT, help="Minimum pair count (default: 2)")

    similar_parser = subparsers.add_parser("similar", help="Papers similar to a given paper")
    _add_data_argument(similar_parser)
    similar_parser.add_argument("--id", required=True, help="Paper ID")
    similar_parser.add_argument("--top-n", type=int, default=SimilarityFinder.DEFAULT_TOP_N, help="Number of results")

    insights_parser = subparsers.add_parser("insights", help="Narrative insights")
    _add_data_argument(insights_parser)
    _add_filter_arguments(insights_parser)

    predict_parser = subparsers.add_parser("predict", help="Trend predictions per tag")
    _add_data_argument(predict_parser)
    _add_filter_arguments(predict_parser)
    predict_parser.add_argument("--top-n", type=int, default=TrendPredictor.DEFAULT_TOP_N, help="Number of predictions")

    advise_parser = subparsers.add_parser("advise", help="Research advisor for selected tags")
    _add_data_argument(advise_parser)
    _add_filter_arguments(advise_parser)

    analyze_parser = subparsers.add_parser("analyze", help="Run every analysis and save the results")
    _add_data_argument(analyze_parser)
    _add_filter_arguments(analyze_parser)
    _add_group_by_argument(analyze_parser)
    analyze_parser.add_argument("--metric", choices=METRIC_VALUES, default="count")
    analyze_parser.add_argument("--selected-tags", type=str, default=None, help="Comma-separated tags for the advisor")
    analyze_parser.add_argument("--type", choices=COOCCURRENCE_TYPES, default="tags")
    analyze_parser.add_argument("--min", type=int, default=NetworkAnalyzer.DEFAULT_MIN_COUNT)
    analyze_parser.add_argument(
        "--output", "-o",
        type=str,
        default=str(config.OUTPUT_DIR),
        help=f"Output directory (default: {config.OUTPUT_DIR})"
    )

    report_parser = subparsers.add_parser("report", help="Generate analysis report")
    report_parser.add_argument(
        "--input", "-i",
        type=str,
        required=True,
        help="Input directory with analysis results"
    )
    report_parser.add_argument(
        "--format", "-f",
        type=str,
        choices=["markdown", "html", "json"],
        default="markdown",
        help="Output format (default: markdown)"
    )
    report_parser.add_argument(
        "--output", "-o",
        type=str,
        default=None,
        help="Output file (default: stdout)"
    )

    return parser


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=json_default))


def _load(args: argparse.Namespace):
    """Load the corpus and apply the filter flags; returns (all, filtered)."""
    all_papers = PaperStore(args.data).load()
    papers = filter_papers(
        all_papers,
        q=getattr(args, "q", None),
        tags=parse_csv(getattr(args, "tags", None)),
        methods=parse_csv(getattr(args, "methods", None)),
        year_from=getattr(args, "year_from", None),
        year_to=getattr(args, "year_to", None),
    )
    return all_papers, papers


def cmd_search(args: argparse.Namespace) -> int:
    """Execute the search command."""
    _, papers = _load(args)
    _print_json({"papers": papers, "total": len(papers)})
    return 0


def cmd_trends(args: argparse.Namespace) -> int:
    """Execute the trends command."""
    _, papers = _load(args)
    data = TrendAnalyzer().compute_trends(papers, args.group_by, args.metric)
    _print_json({"data": data, "metric": args.metric, "group_by": args.group_by})
    return 0


def cmd_tags(args: argparse.Namespace) -> int:
    """Execute the tags command."""
    _, papers = _load(args)
    analyzer = TrendAnalyzer()
    _print_json({
        "distribution": analyzer.compute_tag_distribution(papers, args.top_n),
        "time_series": analyzer.compute_tag_time_series(papers, args.group_by),
        "group_by": args.group_by,
    })
    return 0


def cmd_cooccurrence(args: argparse.Namespace) -> int:
    """Execute the cooccurrence command."""
    _, papers = _load(args)
    graph = NetworkAnalyzer().compute_cooccurrence(papers, args.type, args.min)
    _print_json({**graph, "type": args.type})
    return 0


def cmd_similar(args: argparse.Namespace) -> int:
    """Execute the similar command."""
    store = PaperStore(args.data)
    paper = store.get_paper_by_id(args.id)
    if paper is None:
        print(f"Error: paper not found: {args.id}", file=sys.stderr)
        return 1

    similar = SimilarityFinder().find_similar_papers(paper, store.load(), args.top_n)
    _print_json({"source": paper, "similar": similar})
    return 0


def cmd_insights(args: argparse.Namespace) -> int:
    """Execute the insights command."""
    _, papers = _load(args)
    _print_json(InsightGenerator().generate_insights(papers))
    return 0


def cmd_predict(args: argparse.Namespace) -> int:
    """Execute the predict command."""
    _, papers = _load(args)
    _print_json(TrendPredictor().predict(papers, args.top_n))
    return 0


def cmd_advise(args: argparse.Namespace) -> int:
    """Execute the advise command."""
    selected_tags = parse_csv(args.tags)
    if not selected_tags:
        print("Error: --tags is required for advise", file=sys.stderr)
        return 1

    all_papers, papers = _load(args)
    advice = ResearchAdvisor().advise(papers, all_papers, selected_tags)
    if advice is None:
        print("Not enough matching papers for advice (need at least 3).", file=sys.stderr)
    _print_json(advice)
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    """Execute the analyze command."""
    print(f"Research Trends v{__version__}")
    print("=" * 60)

    all_papers, papers = _load(args)
    print(f"Loaded {len(all_papers):,} papers ({len(papers):,} after filters)")

    analyzer = ResearchAnalyzer(papers, all_papers=all_papers, output_dir=args.output)
    analyzer.analyze(
        group_by=args.group_by,
        metric=args.metric,
        selected_tags=parse_csv(args.selected_tags),
        cooccurrence_type=args.type,
        min_count=args.min,
    )

    print("\nAnalysis complete!")
    print(f"Results saved to: {args.output}/analysis/")
    return 0


def cmd_report(args: argparse.Namespace) -> int:
    """Execute the report command."""
    from research_trends.reporter import ReportGenerator

    generator = ReportGenerator(args.input)
    report = generator.generate(format=args.format)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(report)
        print(f"Report saved to: {args.output}")
    else:
        print(report)

    return 0


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.getLevelName(config.LOG_LEVEL)
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {config.LOG_LEVEL}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


COMMANDS = {
    "search": cmd_search,
    "trends": cmd_trends,
    "tags": cmd_tags,
    "cooccurrence": cmd_cooccurrence,
    "similar": cmd_similar,
    "insights": cmd_insights,
    "predict": cmd_predict,
    "advise": cmd_advise,
    "analyze": cmd_analyze,
    "report": cmd_report,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        _configure_logging(args.verbose)
        return COMMANDS[args.command](args)
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
