"""
Plain-text rendering of a MatchResult.

Used by ``scripts/match_job.py``; the matcher itself never formats text. Selected
content passes through ``curation`` here, on its way to the page: project
technology lists are filtered and ordered, and achievement bullets are
deduplicated and ordered by impact.
"""

from typing import Optional

from tailor.contexts.history.skills import SkillsData
from tailor.contexts.targeting.curation import process_bullets, process_technologies
from tailor.contexts.targeting.match_result import MatchResult
from tailor.utils.report_formatter import Column, TableFormatter, format_percentage

JOB_COLUMNS = [
    Column("Company", 20),
    Column("Title", 26),
    Column("Total", 6, ">"),
    Column("Tech", 6, ">"),
    Column("Domain", 6, ">"),
    Column("Level", 6, ">"),
    Column("Recent", 6, ">"),
]

SKILL_COLUMNS = [
    Column("Skill", 22),
    Column("Category", 14),
    Column("Level", 12),
    Column("Score", 6, ">"),
    Column("Match", 10),
]

COVERAGE_COLUMNS = [
    Column("Technology", 22),
    Column("Kind", 10),
    Column("Covered", 8),
    Column("Evidence", 36),
]


def format_match_report(result: MatchResult, skills: Optional[SkillsData] = None, top_jobs: int = 5) -> str:
    """
    Render a match result as an 80-column text report.

    Args:
        result: Output of match_against_requirements()
        skills: Inventory the result was computed from, used to show skill categories
        top_jobs: Number of ranked jobs to list

    Returns:
        Report text (no trailing newline)
    """
    summary = result.summary
    coverage = result.technology_coverage

    report = TableFormatter()
    report.add_section_header(f"MATCH REPORT: {result.requirements.title}")
    report.add_key_value("Overall Fit", summary.overall_fit.upper())
    report.add_key_value("Technology Coverage", f"{coverage.coverage_percent}%")

    report.add_subheader("Strengths").add_bullets(summary.strengths, marker="+", empty="(none)")
    report.add_subheader("Gaps").add_bullets(summary.gaps, marker="-", empty="(none)")
    report.add_subheader("Recommendations").add_bullets(summary.recommendations, empty="(none)")

    report.add_subheader("Top Jobs")
    if result.ranked_jobs:
        report.with_columns(JOB_COLUMNS).add_table_header()
        for job in result.ranked_jobs[:top_jobs]:
            scores = job.scores
            report.add_row(
                [
                    job.company_name,
                    job.title,
                    format_percentage(job.total_score),
                    format_percentage(scores.technology_match),
                    format_percentage(scores.domain_match),
                    format_percentage(scores.seniority_match),
                    format_percentage(scores.recency),
                ]
            )
    else:
        report.add_text("  (no jobs above the score threshold)")

    report.add_subheader("Selected Projects")
    if result.selected_projects:
        for scored_project in result.selected_projects:
            project = scored_project.project
            score = format_percentage(scored_project.score)
            report.add_bullets([f"{project.name} ({score}): {scored_project.relevance_reason}"])
            technologies = process_technologies(project.technologies)
            if technologies:
                report.add_text(f"      Tech: {', '.join(technologies)}")
    else:
        report.add_text("  (none)")

    report.add_subheader("Selected Achievements")
    reasons = {}
    for scored_achievement in result.selected_achievements:
        reasons.setdefault(scored_achievement.achievement.description, scored_achievement.relevance_reason)
    bullets = process_bullets(list(reasons), len(reasons))
    report.add_bullets((f"{bullet} [{reasons[bullet]}]" for bullet in bullets), empty="(none)")

    report.add_subheader("Selected Skills")
    if result.selected_skills:
        report.with_columns(SKILL_COLUMNS).add_table_header()
        for scored in result.selected_skills:
            if scored.is_required:
                match_kind = "required"
            elif scored.is_preferred:
                match_kind = "preferred"
            else:
                match_kind = ""
            category = skills.category_of(scored.skill.name) if skills else ""
            report.add_row([scored.skill.name, category, scored.skill.level, format_percentage(scored.score), match_kind])
    else:
        report.add_text("  (none)")

    report.add_subheader("Technology Coverage")
    entries = [("required", e) for e in coverage.required] + [("preferred", e) for e in coverage.preferred]
    if entries:
        report.with_columns(COVERAGE_COLUMNS).add_table_header()
        for kind, entry in entries:
            report.add_row([entry.tech, kind, "yes" if entry.covered else "no", entry.source or ""])
    else:
        report.add_text("  (no technologies requested)")

    return report.render()
