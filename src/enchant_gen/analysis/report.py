"""Text report for a sampled selection batch."""

from __future__ import annotations

from enchant_gen.analysis.models import EffectMetrics, SelectionSummary


def generate_text_report(
    summary: SelectionSummary,
    metrics: list[EffectMetrics],
    title: str = "Selection Report",
) -> str:
    """Generate a human-readable summary of a sampling batch."""
    lines: list[str] = []

    lines.append("=" * 60)
    lines.append(title)
    lines.append(f"Runs: {summary.total_runs:,}")
    lines.append("=" * 60)

    lines.append("")
    lines.append("## Summary")
    lines.append(f"  Mean picks:  {summary.mean_picks:.2f}")
    lines.append(f"  Max picks:   {summary.max_picks}")
    lines.append(f"  Empty rolls: {summary.empty_rate:.1%} ({summary.empty_runs}/{summary.total_runs})")

    if summary.picks_histogram:
        lines.append("")
        lines.append("## Picks per Roll")
        for n_picks, runs in summary.picks_histogram.items():
            lines.append(f"  {n_picks:2d}: {runs}")

    lines.append("")
    lines.append("## Effects by Pick Rate")
    if not metrics:
        lines.append("  (none)")
    for m in sorted(metrics, key=lambda m: m.pick_rate, reverse=True):
        levels = " ".join(f"{lvl}:{n}" for lvl, n in m.level_counts.items())
        lines.append(
            f"  {m.effect_id:34s}  rate={m.pick_rate:.3f}"
            f"  mean_lvl={m.mean_level:.2f}  levels[{levels}]"
        )

    return "\n".join(lines)
