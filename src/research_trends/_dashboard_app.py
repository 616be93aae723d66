"""
Research Trends Dashboard App
=============================
Streamlit pages over a paper corpus. Started by ``research-trends-dashboard``,
which forwards ``--data PATH`` after the ``--`` separator.

Usage:
    streamlit run _dashboard_app.py -- --data data/papers.json
"""

import argparse
import math

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from research_trends import config
from research_trends.analyzers import (
    InsightGenerator,
    NetworkAnalyzer,
    ResearchAdvisor,
    SimilarityFinder,
    TagAnalyzer,
    TrendAnalyzer,
    TrendPredictor,
    filter_papers,
)
from research_trends.store import PaperStore

# Page configuration
st.set_page_config(
    page_title="Research Trends",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        font-weight: bold;
        margin-bottom: 0.5rem;
    }
    .sub-header {
        font-size: 1.2rem;
        color: #666;
        margin-bottom: 2rem;
    }
</style>
""", unsafe_allow_html=True)


# ============================================================================
# Data Loading
# ============================================================================

def parse_app_args():
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--data", "-d", type=str, default=str(config.DATA_PATH))
    args, _ = parser.parse_known_args()
    return args


@st.cache_resource
def load_store(data_path):
    """Load and validate the corpus once per data path."""
    store = PaperStore(data_path)
    store.load()
    return store


def papers_to_frame(papers):
    """Flatten papers into a DataFrame for tables."""
    return pd.DataFrame([
        {
            "ID": p.id,
            "Title": p.title,
            "Year": p.year,
            "Month": p.month,
            "Venue": p.venue,
            "Citations": p.citations,
            "Tags": ", ".join(p.tags),
            "Methods": ", ".join(p.methods),
            "URL": p.url,
        }
        for p in papers
    ])


def header(title, subtitle):
    st.markdown(f'<p class="main-header">{title}</p>', unsafe_allow_html=True)
    st.markdown(f'<p class="sub-header">{subtitle}</p>', unsafe_allow_html=True)


# ============================================================================
# Pages
# ============================================================================

def render_overview_page(papers, all_papers, filters):
    """Render the Overview page."""
    header("Research Trends", "Publication activity for the current filters")

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Papers", f"{len(papers):,}")
    with col2:
        st.metric("Citations", f"{sum(p.citations for p in papers):,}")
    with col3:
        st.metric("Tags", len({t for p in papers for t in p.tags}))
    with col4:
        st.metric("Venues", len({p.venue for p in papers}))

    st.markdown("---")
    st.subheader("Key Insights")
    insights = InsightGenerator().generate_insights(papers)
    if insights:
        for insight in insights:
            st.markdown(f"{insight['icon']} {insight['text']}")
    else:
        st.info("Not enough data for insights.")

    st.markdown("---")
    st.subheader("Publication Trend")

    col1, col2 = st.columns(2)
    with col1:
        group_by = st.radio("Group by", ["month", "year"], horizontal=True)
    with col2:
        metric = st.radio("Metric", ["count", "citations"], horizontal=True)

    data = TrendAnalyzer().compute_trends(papers, group_by, metric)
    if data:
        fig = px.line(
            pd.DataFrame(data),
            x="period",
            y="value",
            markers=True,
            labels={"period": "Period", "value": "Papers" if metric == "count" else "Citations"}
        )
        fig.update_layout(margin=dict(l=20, r=20, t=20, b=20))
        st.plotly_chart(fig, use_container_width=True)


def render_tags_page(papers, all_papers, filters):
    """Render the Tags page."""
    header("Tag Trends", "Which topics dominate and how they move over time")

    analyzer = TrendAnalyzer()
    top_n = st.slider("Top tags", min_value=5, max_value=30, value=TrendAnalyzer.DEFAULT_TOP_TAGS)
    distribution = analyzer.compute_tag_distribution(papers, top_n)

    if not distribution:
        st.info("No tags in the current selection.")
        return

    fig = px.bar(
        pd.DataFrame(distribution),
        y="tag",
        x="count",
        orientation="h",
        color="count",
        color_continuous_scale="Blues",
        labels={"tag": "Tag", "count": "Papers"}
    )
    fig.update_layout(
        yaxis={"categoryorder": "total ascending"},
        margin=dict(l=20, r=20, t=20, b=20),
        height=max(400, 25 * len(distribution))
    )
    st.plotly_chart(fig, use_container_width=True)

    st.markdown("---")
    st.subheader("Tag Activity Heatmap")

    group_by = st.radio("Group by", ["year", "month"], horizontal=True, key="tag_group_by")
    series = pd.DataFrame(analyzer.compute_tag_time_series(papers, group_by))
    top_tags = [d["tag"] for d in distribution]
    series = series[series["tag"].isin(top_tags)]
    heatmap = series.pivot_table(index="tag", columns="period", values="count", fill_value=0)
    heatmap = heatmap.reindex([t for t in top_tags if t in heatmap.index])

    fig = px.imshow(
        heatmap,
        aspect="auto",
        color_continuous_scale="Viridis",
        labels={"x": "Period", "y": "Tag", "color": "Papers"}
    )
    fig.update_layout(margin=dict(l=20, r=20, t=20, b=20))
    st.plotly_chart(fig, use_container_width=True)


def render_network_page(papers, all_papers, filters):
    """Render the Co-occurrence Network page."""
    header("Co-occurrence Network", "Tags or methods that appear together on papers")

    col1, col2 = st.columns(2)
    with col1:
        field = st.radio("Field", ["tags", "methods"], horizontal=True)
    with col2:
        min_count = st.slider("Minimum co-occurrence", 1, 20, NetworkAnalyzer.DEFAULT_MIN_COUNT)

    graph = NetworkAnalyzer().compute_cooccurrence(papers, field, min_count)
    nodes, links = graph["nodes"], graph["links"]

    if not links:
        st.info("No pairs reach the minimum co-occurrence.")
        return

    # Circular layout, node order as discovered
    positions = {}
    for i, node in enumerate(nodes):
        angle = 2 * math.pi * i / len(nodes)
        positions[node["id"]] = (math.cos(angle), math.sin(angle))

    max_link = max(link["value"] for link in links)
    fig = go.Figure()
    for link in links:
        x0, y0 = positions[link["source"]]
        x1, y1 = positions[link["target"]]
        fig.add_trace(go.Scatter(
            x=[x0, x1],
            y=[y0, y1],
            mode="lines",
            line=dict(width=1 + 5 * link["value"] / max_link, color="#999"),
            hoverinfo="skip",
            showlegend=False
        ))

    max_node = max(node["value"] for node in nodes)
    fig.add_trace(go.Scatter(
        x=[positions[n["id"]][0] for n in nodes],
        y=[positions[n["id"]][1] for n in nodes],
        mode="markers+text",
        text=[n["id"] for n in nodes],
        textposition="top center",
        marker=dict(
            size=[10 + 30 * n["value"] / max_node for n in nodes],
            color=[n["value"] for n in nodes],
            colorscale="Blues",
            showscale=True
        ),
        hovertemplate="%{text}<br>Papers: %{marker.color}<extra></extra>",
        showlegend=False
    ))
    fig.update_layout(
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=20, r=20, t=20, b=20),
        height=700
    )
    st.plotly_chart(fig, use_container_width=True)

    st.subheader("Strongest Pairs")
    links_df = pd.DataFrame(links).sort_values("value", ascending=False)
    st.dataframe(links_df, hide_index=True, use_container_width=True)


def render_advisor_page(papers, all_papers, filters):
    """Render the Tag Explorer and Research Advisor page."""
    header("Research Advisor", "Deep dive into selected tags and where to go next")

    selected_tags = filters["tags"]
    if not selected_tags:
        st.info("Select one or more tags in the sidebar.")
        return

    analysis = TagAnalyzer().analyze(papers, selected_tags)
    if analysis is None:
        st.warning("No papers match the selected tags.")
        return

    col1, col2, col3, col4 = st.columns(4)
    with col1:
        st.metric("Papers", analysis["total_papers"])
    with col2:
        st.metric("Avg Citations", analysis["avg_citations"])
    with col3:
        st.metric("Max Citations", f"{analysis['max_citations']:,}")
    with col4:
        growth = analysis["growth_rate"]
        st.metric("YoY Growth", f"{growth:+d}%" if growth is not None else "n/a")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Papers per Year")
        years_df = pd.DataFrame(analysis["year_trend"], columns=["Year", "Papers"])
        fig = px.bar(years_df, x="Year", y="Papers")
        fig.update_layout(margin=dict(l=20, r=20, t=20, b=20))
        st.plotly_chart(fig, use_container_width=True)
    with col2:
        st.subheader("Related Tags")
        st.dataframe(
            pd.DataFrame(analysis["related_tags"], columns=["Tag", "Papers"]),
            hide_index=True,
            use_container_width=True
        )

    st.subheader("Most Cited")
    st.dataframe(papers_to_frame(analysis["top_cited"]), hide_index=True, use_container_width=True)

    st.markdown("---")
    advice = ResearchAdvisor().advise(papers, all_papers, selected_tags)
    if advice is None:
        st.info("At least 3 matching papers are needed for research advice.")
        return

    st.subheader("Suggested Topics")
    for s in advice["suggestions"]:
        with st.expander(f"{s['title']} ({s['confidence']})"):
            st.markdown(s["reasoning"])
            if s["related_methods"]:
                st.markdown(f"**Methods:** {', '.join(s['related_methods'])}")
            if s["target_venues"]:
                st.markdown(f"**Target venues:** {', '.join(s['target_venues'])}")

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Sub-topics")
        st.dataframe(pd.DataFrame(advice["sub_topics"]), hide_index=True, use_container_width=True)
    with col2:
        st.subheader("Method Gaps")
        st.dataframe(pd.DataFrame(advice["method_gaps"]), hide_index=True, use_container_width=True)

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Cross-topic Opportunities")
        st.dataframe(pd.DataFrame(advice["cross_opportunities"]), hide_index=True, use_container_width=True)
    with col2:
        st.subheader("Venue Strategy")
        st.dataframe(pd.DataFrame(advice["venue_strategy"]), hide_index=True, use_container_width=True)


def render_predictions_page(papers, all_papers, filters):
    """Render the Predictions page."""
    header("Trend Predictions", "Which directions look most promising to publish in")

    predictions = TrendPredictor().predict(papers)
    if not predictions:
        st.info("At least two years of data are needed for predictions.")
        return

    pred_df = pd.DataFrame(predictions)
    fig = px.bar(
        pred_df,
        y="direction",
        x="score",
        orientation="h",
        color="momentum",
        color_discrete_map={"rising": "#2ca02c", "stable": "#1f77b4", "declining": "#d62728"},
        hover_data=["growth_pct", "avg_citations", "paper_count"],
        labels={"direction": "Direction", "score": "Score"}
    )
    fig.update_layout(
        yaxis={"categoryorder": "total ascending"},
        margin=dict(l=20, r=20, t=20, b=20)
    )
    st.plotly_chart(fig, use_container_width=True)

    for p in predictions:
        st.markdown(f"**{p['direction']}** ({p['score']}, {p['momentum']}): {p['reason']}")


def render_paper_explorer_page(papers, all_papers, filters):
    """Render the Paper Explorer page."""
    header("Paper Explorer", "Browse papers and find similar work")

    sort_by = st.selectbox("Sort by", ["Citations", "Year", "Title"])
    df = papers_to_frame(papers)
    if df.empty:
        st.info("No papers match the current filters.")
        return

    st.dataframe(
        df.sort_values(sort_by, ascending=sort_by == "Title"),
        hide_index=True,
        use_container_width=True
    )

    st.markdown("---")
    st.subheader("Similar Papers")

    titles = {f"{p.title} ({p.id})": p for p in papers}
    choice = st.selectbox("Paper", list(titles.keys()))
    if choice:
        similar = SimilarityFinder().find_similar_papers(titles[choice], all_papers)
        if similar:
            sim_df = papers_to_frame([s["paper"] for s in similar])
            sim_df.insert(0, "Similarity", [round(s["similarity"], 2) for s in similar])
            st.dataframe(sim_df, hide_index=True, use_container_width=True)
        else:
            st.info("No papers share tags or methods with this one.")


# ============================================================================
# Main
# ============================================================================

def sidebar_filters(store):
    st.sidebar.markdown("### Filters")

    q = st.sidebar.text_input("Search", "")
    tags = st.sidebar.multiselect("Tags", store.get_all_tags())
    methods = st.sidebar.multiselect("Methods", store.get_all_methods())

    year_range = store.get_year_range()
    if year_range["min"] < year_range["max"]:
        year_from, year_to = st.sidebar.slider(
            "Years",
            min_value=year_range["min"],
            max_value=year_range["max"],
            value=(year_range["min"], year_range["max"])
        )
    else:
        year_from = year_to = year_range["min"]

    return {"q": q, "tags": tags, "methods": methods, "year_from": year_from, "year_to": year_to}


def main():
    """Main application entry point."""
    args = parse_app_args()
    store = load_store(args.data)
    all_papers = store.load()

    if not all_papers:
        st.error(f"No papers loaded from {args.data}.")
        return

    errors = store.get_validation_errors()
    if errors:
        st.sidebar.warning(f"{len(errors)} validation issue(s) in the data file.")

    st.sidebar.title("Navigation")

    pages = {
        "Overview": render_overview_page,
        "Tags": render_tags_page,
        "Network": render_network_page,
        "Research Advisor": render_advisor_page,
        "Predictions": render_predictions_page,
        "Paper Explorer": render_paper_explorer_page,
    }

    selected_page = st.sidebar.radio("Go to", list(pages.keys()))

    st.sidebar.markdown("---")
    filters = sidebar_filters(store)
    papers = filter_papers(all_papers, **filters)

    st.sidebar.markdown("---")
    st.sidebar.markdown("### Quick Stats")
    st.sidebar.markdown(f"**Papers:** {len(papers):,} of {len(all_papers):,}")
    st.sidebar.markdown(f"**Total Citations:** {sum(p.citations for p in papers):,}")

    pages[selected_page](papers, all_papers, filters)

    st.sidebar.markdown("---")
    st.sidebar.markdown("### About")
    st.sidebar.markdown("""
    Research Trends Dashboard

    Built with Streamlit and Plotly
    """)


if __name__ == "__main__":
    main()
