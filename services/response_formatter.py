"""Structured Markdown formatter for routine analysis results."""

from typing import List, Optional

from models.entities import (
    AnalysisReport,
    BalanceScoreBreakdown,
    Conflict,
    FreeSlot,
    HealthSummary,
    JobCompatibility,
    OverloadedDay,
    QuickSuggestion,
)

SEVERITY_ICONS = {"low": "🟢", "medium": "🟡", "high": "🟠", "critical": "🔴"}
STATUS_ICONS = {"ok": "✅", "warning": "⚠️", "error": "❌"}


class ResponseFormatter:
    """Formats analysis results in a consistent, structured manner."""

    @staticmethod
    def format_section(title: str, content: List[str], icon: str = "📋") -> str:
        """Format a section with title and content."""
        lines = [f"**{icon} {title}**", ""]
        lines.extend(content)
        return "\n".join(lines)

    @staticmethod
    def format_list_item(index: int, text: str, highlight: bool = False) -> str:
        """Format a list item with optional highlighting."""
        prefix = "⭐" if highlight else f"{index}."
        return f"{prefix} {text}"

    @staticmethod
    def format_info_line(label: str, value: str, good: bool = True) -> str:
        """Format an info line with a status indicator."""
        icon = "✅" if good else "❌"
        return f"   {icon} **{label}:** {value}"

    @staticmethod
    def format_score_breakdown(score: int, breakdown: BalanceScoreBreakdown) -> str:
        components = [
            ("Base score", breakdown.base_score),
            ("Work/study balance", breakdown.work_study_adjustment),
            ("Rest time", breakdown.rest_adjustment),
            ("Conflicts", breakdown.conflict_penalty),
            ("Overloaded days", breakdown.overload_penalty),
            ("Bonuses", breakdown.bonuses),
        ]
        lines = [f"• **{label}:** {value:+d}" for label, value in components]
        lines.append("")
        lines.append(f"Raw total **{breakdown.raw_total}**, final score **{score}/100**")
        return ResponseFormatter.format_section(f"Balance Score: {score}/100", lines, icon="📊")

    @staticmethod
    def format_conflicts(conflicts: List[Conflict]) -> str:
        if not conflicts:
            return ResponseFormatter.format_section("Conflicts", ["No schedule conflicts."], icon="✅")

        lines = []
        for i, conflict in enumerate(conflicts, 1):
            icon = SEVERITY_ICONS[conflict.severity]
            lines.append(ResponseFormatter.format_list_item(
                i,
                f"{icon} **{conflict.date.isoformat()}**: {conflict.event_a.title} "
                f"({conflict.event_a.start}-{conflict.event_a.end}) / {conflict.event_b.title} "
                f"({conflict.event_b.start}-{conflict.event_b.end})",
            ))
            lines.append(
                f"   • {conflict.overlap_minutes} min overlap, {conflict.severity}, "
                f"impact {conflict.score_impact}"
            )
            lines.append(f"   • {conflict.suggestion}")
            lines.append("")
        return ResponseFormatter.format_section(f"Conflicts ({len(conflicts)})", lines, icon="⚠️")

    @staticmethod
    def format_overloaded_days(days: List[OverloadedDay]) -> str:
        if not days:
            return ResponseFormatter.format_section("Overloaded Days", ["No overloaded day."], icon="✅")

        lines = []
        for i, day in enumerate(days, 1):
            lines.append(ResponseFormatter.format_list_item(
                i,
                f"**{day.weekday.capitalize()} {day.date.isoformat()}**: "
                f"{day.total_hours:.1f}h ({day.level})",
                highlight=i == 1,
            ))
            for hint in day.recommendations:
                lines.append(f"   • {hint}")
            lines.append("")
        return ResponseFormatter.format_section(f"Overloaded Days ({len(days)})", lines, icon="🔥")

    @staticmethod
    def format_free_slots(slots: List[FreeSlot], limit: Optional[int] = 5) -> str:
        if not slots:
            return ResponseFormatter.format_error(
                "No Free Slots",
                "No usable free time was found in your availability.",
                suggestions=["Declare more availability", "Move some events"],
            )

        shown = slots if limit is None else slots[:limit]
        lines = [
            ResponseFormatter.format_list_item(
                i,
                f"{slot.weekday.capitalize()} {slot.start}-{slot.end} ({slot.duration_hours:.1f}h)",
                highlight=i == 1,
            )
            for i, slot in enumerate(shown, 1)
        ]
        if len(slots) > len(shown):
            lines.append("")
            lines.append(f"*+ {len(slots) - len(shown)} more slot(s).*")
        return ResponseFormatter.format_section(f"Free Slots ({len(slots)})", lines, icon="🗓️")

    @staticmethod
    def format_health_summary(summary: HealthSummary) -> str:
        lines = [f"Status: **{summary.status}**", "", "**Main issues:**"]
        lines.extend(f"• {issue}" for issue in summary.main_issues)
        lines.append("")
        lines.append("**Strengths:**")
        lines.extend(f"• {strength}" for strength in summary.main_strengths)
        return ResponseFormatter.format_section("Health Summary", lines, icon="💚")

    @staticmethod
    def format_report(report: AnalysisReport) -> str:
        """Format a full analysis report."""
        stats = report.statistics
        allocation = [
            f"Period: **{report.range_start.isoformat()}** to **{report.range_end.isoformat()}**",
            "",
            f"• Work: {stats.work_hours:.1f}h ({stats.work_percentage:.0f}%)",
            f"• Study: {stats.study_hours:.1f}h ({stats.study_percentage:.0f}%)",
            f"• Activities: {stats.activity_hours:.1f}h ({stats.activity_percentage:.0f}%)",
            f"• Rest: {stats.rest_hours:.1f}h ({stats.rest_percentage:.0f}%)",
        ]

        sections = [
            ResponseFormatter.format_score_breakdown(report.score, report.breakdown),
            ResponseFormatter.format_section("Time Allocation", allocation, icon="⏱️"),
            ResponseFormatter.format_conflicts(list(report.conflicts)),
            ResponseFormatter.format_overloaded_days(list(report.overloaded_days)),
            ResponseFormatter.format_free_slots(list(report.free_slots)),
            ResponseFormatter.format_health_summary(report.health_summary),
        ]
        return "\n\n".join(sections)

    @staticmethod
    def format_quick_suggestion(suggestion: QuickSuggestion) -> str:
        lines = [suggestion.message, ""]
        lines.extend(f"• {r}" for r in suggestion.recommendations)
        return ResponseFormatter.format_section(
            f"Impact {suggestion.impact_score:+d}", lines, icon=STATUS_ICONS[suggestion.status]
        )

    @staticmethod
    def format_job_compatibility(result: JobCompatibility) -> str:
        lines = [
            result.message,
            "",
            ResponseFormatter.format_info_line(
                "Available", f"{result.available_hours:.1f}h for {result.required_hours}h required",
                result.available_hours >= result.required_hours,
            ),
            ResponseFormatter.format_info_line(
                "Balance impact", f"{result.balance_impact:+d}", result.balance_impact >= 0
            ),
            "",
        ]
        lines.extend(f"• {reason}" for reason in result.reasons)
        lines.extend(f"• ⚠️ {warning}" for warning in result.warnings)
        lines.append("")
        lines.append(result.recommendation)
        return ResponseFormatter.format_section(
            f"Job Compatibility: {result.score}/100", lines, icon="💼"
        )

    @staticmethod
    def format_error(title: str, message: str, suggestions: Optional[List[str]] = None) -> str:
        """Format an error message."""
        lines = [
            f"**❌ {title}**",
            "",
            message
        ]

        if suggestions:
            lines.append("")
            lines.append("**Suggestions:**")
            for suggestion in suggestions:
                lines.append(f"• {suggestion}")

        return "\n".join(lines)
