"""Plan presentation — rich terminal view and Markdown export."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from schemas.gtm_plan import GTMResponse


def _bullets(items: list[str]) -> str:
    return "\n".join(f"• {escape(item)}" for item in items)


def render_plan(plan: GTMResponse, console: Console | None = None):
    """Print the plan section by section, in results-view order."""
    console = console or Console()

    console.print(
        Panel(escape(plan.executive_summary), title="Executive summary", border_style="bright_magenta")
    )

    phases = Table(title="Launch phases", show_lines=True)
    phases.add_column("Duration", style="yellow", no_wrap=True)
    phases.add_column("Phase", style="bold cyan")
    phases.add_column("Focus")
    phases.add_column("Primary plays")
    phases.add_column("Proof points", style="dim")
    for phase in plan.launch_phases:
        phases.add_row(
            phase.duration,
            phase.name,
            phase.focus,
            _bullets(phase.primary_plays),
            _bullets(phase.proof_points),
        )
    console.print(phases)

    personas = Table(title="Persona intelligence", show_lines=True)
    personas.add_column("Persona", style="bold cyan")
    personas.add_column("Core needs")
    personas.add_column("Adoption triggers")
    personas.add_column("Objection armor", style="red")
    for persona in plan.persona_insights:
        personas.add_row(
            persona.persona,
            _bullets(persona.core_needs),
            _bullets(persona.adoption_triggers),
            _bullets(persona.objections),
        )
    console.print(personas)

    pillars = Table(title="Messaging pillars", show_lines=True)
    pillars.add_column("Pillar", style="bold cyan")
    pillars.add_column("Narrative")
    pillars.add_column("Content angles")
    pillars.add_column("Proof assets", style="dim")
    for pillar in plan.messaging_pillars:
        pillars.add_row(
            pillar.pillar,
            escape(pillar.narrative),
            _bullets(pillar.content_angles),
            _bullets(pillar.proof_assets),
        )
    console.print(pillars)

    channels = Table(title="Channel orchestration", show_lines=True)
    channels.add_column("Channel", style="bold cyan")
    channels.add_column("Role")
    channels.add_column("Cadence")
    channels.add_column("KPIs", style="green")
    for channel in plan.channel_strategy:
        channels.add_row(
            channel.channel,
            channel.role,
            _bullets(channel.cadences),
            _bullets(channel.kpis),
        )
    console.print(channels)

    experiments = Table(title="Growth experiments", show_lines=True)
    experiments.add_column("Experiment", style="bold cyan")
    experiments.add_column("Hypothesis")
    experiments.add_column("Playbook")
    experiments.add_column("Measure", style="green")
    for experiment in plan.growth_experiments:
        experiments.add_row(
            experiment.title,
            experiment.hypothesis,
            _bullets(experiment.playbook),
            experiment.measure,
        )
    console.print(experiments)

    metrics = Table(title="Measurement architecture")
    metrics.add_column("Metric", style="bold cyan")
    metrics.add_column("Target", style="bold")
    metrics.add_column("Instrumentation")
    metrics.add_column("Cadence", style="dim")
    for metric in plan.measurement_framework:
        metrics.add_row(metric.metric, metric.target, metric.instrumentation, metric.cadence)
    console.print(metrics)


def plan_to_markdown(plan: GTMResponse, product_name: str | None = None) -> str:
    """Render the plan as a Markdown document."""
    title = f"# Go-To-Market Blueprint — {product_name}" if product_name else "# Go-To-Market Blueprint"
    lines = [title, "", "## Executive summary", "", plan.executive_summary, ""]

    def _list(heading: str, items: list[str]):
        lines.append(f"**{heading}**")
        lines.append("")
        lines.extend(f"- {item}" for item in items)
        lines.append("")

    lines += ["## Launch phases", ""]
    for phase in plan.launch_phases:
        lines += [f"### {phase.name} ({phase.duration})", "", phase.focus, ""]
        _list("Primary plays", phase.primary_plays)
        _list("Proof points", phase.proof_points)

    lines += ["## Persona intelligence", ""]
    for persona in plan.persona_insights:
        lines += [f"### {persona.persona}", ""]
        _list("Core needs", persona.core_needs)
        _list("Adoption triggers", persona.adoption_triggers)
        _list("Objection armor", persona.objections)

    lines += ["## Messaging pillars", ""]
    for pillar in plan.messaging_pillars:
        lines += [f"### {pillar.pillar}", "", pillar.narrative, ""]
        _list("Content angles", pillar.content_angles)
        _list("Proof assets", pillar.proof_assets)

    lines += ["## Channel orchestration", ""]
    for channel in plan.channel_strategy:
        lines += [f"### {channel.channel}", "", channel.role, ""]
        _list("Cadence", channel.cadences)
        _list("KPIs", channel.kpis)

    lines += ["## Growth experiments", ""]
    for experiment in plan.growth_experiments:
        lines += [f"### {experiment.title}", "", experiment.hypothesis, ""]
        _list("Playbook", experiment.playbook)
        lines += [f"**Measure:** {experiment.measure}", ""]

    lines += [
        "## Measurement architecture",
        "",
        "| Metric | Target | Instrumentation | Cadence |",
        "|---|---|---|---|",
    ]
    for metric in plan.measurement_framework:
        lines.append(
            f"| {metric.metric} | {metric.target} | {metric.instrumentation} | {metric.cadence} |"
        )

    return "\n".join(lines) + "\n"
