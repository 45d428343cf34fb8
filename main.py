"""Go To Market AI Orchestrator — Entry Point.

Usage:
    # Synthesize a plan from a JSON intake file
    python main.py plan --input sample_input.json

    # Same, and export JSON + Markdown
    python main.py plan -i sample_input.json --output plan.json --markdown plan.md

    # Build the intake from flags (form defaults fill the rest)
    python main.py plan --product "OrbitOps" --summary "..." --audience "..." ...

    # Print the sample intake / form presets
    python main.py sample
    python main.py presets

    # Run the web server
    python main.py serve --port 8000
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

import config
from pipeline import gtm_playbook as playbook
from pipeline.gtm_agent import GoToMarketAgent, PlanValidationError
from pipeline.plan_render import plan_to_markdown, render_plan
from schemas.gtm_plan import GTMResponse

console = Console()

# argparse dest → intake field
FLAG_FIELDS = {
    "product": "productName",
    "summary": "productSummary",
    "audience": "audience",
    "problem": "problem",
    "differentiation": "differentiation",
    "pricing": "pricing",
    "voice": "brandVoice",
    "goal": "primaryGoal",
    "metric": "successMetric",
    "horizon": "launchHorizon",
}


def setup_logging():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def load_inputs(args: argparse.Namespace) -> dict:
    """Build the intake from a JSON file or CLI flags.

    Flags start from the form defaults; explicit flags override the file.
    """
    if args.input:
        path = Path(args.input)
        if not path.exists():
            console.print(f"[red]Input file not found: {path}[/red]")
            sys.exit(1)
        inputs = json.loads(path.read_text(encoding="utf-8"))
    else:
        inputs = dict(playbook.FORM_DEFAULTS)

    for dest, field in FLAG_FIELDS.items():
        value = getattr(args, dest, None)
        if value is not None:
            inputs[field] = value
    return inputs


def run_plan(inputs: dict, output: str | None = None, markdown: str | None = None) -> GTMResponse | None:
    """Synthesize, render, and optionally export a plan.

    Returns None when the intake is incomplete.
    """
    agent = GoToMarketAgent()
    console.print(
        Panel(
            f"[bold]{agent.name}[/bold]\n{agent.description}",
            title=f"Running {agent.slug}",
            border_style="cyan",
        )
    )

    try:
        plan = agent.run(inputs)
    except PlanValidationError as e:
        console.print("[red]Missing required fields:[/red]")
        for field in e.missing:
            console.print(f"  [red]• {field}[/red]")
        return None

    render_plan(plan, console)

    if output:
        output_path = Path(output)
        output_path.write_text(json.dumps(plan.to_payload(), indent=2, ensure_ascii=False), encoding="utf-8")
        console.print(f"  [green]Plan saved:[/green] {output_path}")
    if markdown:
        markdown_path = Path(markdown)
        markdown_path.write_text(plan_to_markdown(plan, inputs.get("productName")), encoding="utf-8")
        console.print(f"  [green]Markdown saved:[/green] {markdown_path}")

    return plan


def print_sample():
    path = config.SAMPLE_INPUT_PATH
    if not path.exists():
        console.print(f"[red]Sample input not found: {path}[/red]")
        sys.exit(1)
    console.print_json(path.read_text(encoding="utf-8"))


def print_presets():
    console.print_json(
        data={
            "defaults": dict(playbook.FORM_DEFAULTS),
            "brandVoicePresets": list(playbook.BRAND_VOICE_PRESETS),
            "launchHorizonPresets": list(playbook.LAUNCH_HORIZON_PRESETS),
        }
    )


def serve(host: str, port: int):
    import uvicorn
    uvicorn.run("server:app", host=host, port=port, log_level="info")


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Go To Market AI Orchestrator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # -- plan command --
    plan_cmd = subparsers.add_parser("plan", help="Synthesize a go-to-market plan")
    _add_input_args(plan_cmd)
    plan_cmd.add_argument("--output", "-o", help="Write the plan JSON to this path")
    plan_cmd.add_argument("--markdown", help="Write the plan as Markdown to this path")

    subparsers.add_parser("sample", help="Print the sample intake JSON")
    subparsers.add_parser("presets", help="Print form defaults and presets")

    # -- serve command --
    serve_cmd = subparsers.add_parser("serve", help="Run the web server")
    serve_cmd.add_argument("--host", default=config.SERVER_HOST)
    serve_cmd.add_argument("--port", type=int, default=config.SERVER_PORT)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    setup_logging()

    if args.command == "plan":
        plan = run_plan(load_inputs(args), output=args.output, markdown=args.markdown)
        if plan is None:
            sys.exit(1)
    elif args.command == "sample":
        print_sample()
    elif args.command == "presets":
        print_presets()
    elif args.command == "serve":
        serve(args.host, args.port)


def _add_input_args(parser: argparse.ArgumentParser):
    """Add intake arguments to a subparser."""
    parser.add_argument("--input", "-i", help="Path to JSON intake file")
    parser.add_argument("--product", "-p", help="Product name")
    parser.add_argument("--summary", "-s", help="Product summary")
    parser.add_argument("--audience", "-a", help="Target audience")
    parser.add_argument("--problem", help="Problem you're solving")
    parser.add_argument("--differentiation", "-d", help="Why you win")
    parser.add_argument("--pricing", help="Pricing motion")
    parser.add_argument("--voice", help="Brand voice")
    parser.add_argument("--goal", "-g", help="Primary goal")
    parser.add_argument("--metric", "-m", help="North star metric")
    parser.add_argument("--horizon", help="Launch horizon")


if __name__ == "__main__":
    main()
