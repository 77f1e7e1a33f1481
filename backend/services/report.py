"""Downloadable JSON report built from a match and its category breakdown."""

from models.responses import CategoryGroup, MatchReport, MatchResult, SkillCategoryResult

REPORT_FILENAME = "resume-match-report.json"


def build_report(match: MatchResult, categories: list[SkillCategoryResult]) -> MatchReport:
    return MatchReport(
        score=match.percentage,
        matched=list(match.matched_skills),
        missing=list(match.missing_skills),
        groups=[
            CategoryGroup(category=c.category, matched=list(c.matched), missing=list(c.missing))
            for c in categories
        ],
    )
