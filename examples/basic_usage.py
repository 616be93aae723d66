#!/usr/bin/env python3
"""
Basic Usage Example
===================

This example demonstrates how to use Research Trends to load a paper
corpus, filter it and run the analyzers.
"""

from research_trends import PaperStore, ResearchAnalyzer
from research_trends.analyzers import ResearchAdvisor, SimilarityFinder, filter_papers


def main():
    """Run a basic analysis over the sample corpus."""

    # 1. Load the corpus
    print("=" * 60)
    print("Research Trends - Basic Usage Example")
    print("=" * 60)

    store = PaperStore("data/papers.json")
    papers = store.load()

    print(f"\nLoaded {len(papers)} papers")
    print(f"Years: {store.get_year_range()}")
    for error in store.get_validation_errors():
        print(f"  warning: {error}")

    # 2. Run all analyses
    print("\n" + "=" * 60)
    print("Running Analysis")
    print("=" * 60)

    analyzer = ResearchAnalyzer(papers, output_dir="example_output")
    results = analyzer.analyze(group_by="year", selected_tags=["tool use"])

    print("\nPapers per year:")
    for point in results["trends"]["data"]:
        print(f"  {point['period']}: {point['value']}")

    print("\nTop tags:")
    for item in results["tags"]["distribution"][:5]:
        print(f"  - {item['tag']}: {item['count']}")

    print("\nInsights:")
    for insight in results["insights"]:
        print(f"  {insight['icon']} {insight['text']}")

    print("\nPredictions:")
    for p in results["predictions"][:3]:
        print(f"  {p['direction']} (score {p['score']}, {p['momentum']})")

    # 3. Advice for recent papers only
    recent = filter_papers(papers, year_from=2024)
    advice = ResearchAdvisor().advise(recent, papers, ["tool use"])
    if advice:
        print("\nSuggested topics:")
        for s in advice["suggestions"]:
            print(f"  - {s['title']} ({s['confidence']})")

    # 4. Similar papers
    target = store.get_paper_by_id("p001")
    if target:
        print(f"\nSimilar to: {target.title}")
        for match in SimilarityFinder().find_similar_papers(target, papers, top_n=3):
            print(f"  {match['similarity']:.2f}  {match['paper'].title}")

    print("\nResults saved to: example_output/analysis/")


if __name__ == "__main__":
    main()
