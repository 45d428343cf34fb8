"""Go-to-market strategist — rule-based plan synthesis.

Transforms the structured intake into a multi-stage launch plan without
calling any language model, so the experience works out of the box.

Selection is plain substring containment on lower-cased text: "cofounder"
matches "founder", "enterprising" does not match "enterprise". Keep it
that way; callers rely on those literal matches.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Mapping

from pipeline import gtm_playbook as playbook
from schemas.gtm_plan import (
    ChannelStrategy,
    GrowthExperiment,
    GTMRequest,
    GTMResponse,
    LaunchPhase,
    MeasurementMetric,
    MessagingPillar,
    PersonaInsight,
    REQUIRED_FIELDS,
    missing_required_fields,
)

logger = logging.getLogger(__name__)


class PlanValidationError(ValueError):
    """Raised when intake fields are absent or blank."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required fields: {', '.join(self.missing)}")


# ---------------------------------------------------------------------------
# Selection rules
# ---------------------------------------------------------------------------

def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def derive_personas(audience: str, primary_goal: str) -> list[Mapping[str, Any]]:
    """Pick persona archetypes in fixed order: builder, operator, executive.

    Falls back to the operator alone when nothing matches.
    """
    lower_audience = audience.lower()
    lower_goal = primary_goal.lower()
    archetypes = playbook.PERSONA_ARCHETYPES
    matches = []

    if _contains_any(lower_audience, ("founder", "developer")):
        matches.append(archetypes["builder"])

    if _contains_any(lower_audience, ("marketing", "growth")) or "pipeline" in lower_goal:
        matches.append(archetypes["operator"])

    if _contains_any(lower_audience, ("executive", "c-suite")) or "enterprise" in lower_goal:
        matches.append(archetypes["executive"])

    if not matches:
        logger.debug("No persona keywords matched, defaulting to %s", archetypes["operator"]["persona"])
        matches.append(archetypes["operator"])

    return matches


def craft_summary(request: GTMRequest) -> str:
    return " ".join([
        f"Launch mission: {request.product_name} will {request.primary_goal.lower()}.",
        f"We anchor messaging around the core product promise — {request.product_summary}.",
        f"Tone must stay {request.brand_voice.lower()} while dramatizing the problem: {request.problem}.",
        f"We lead with proof on how we {request.differentiation.lower()} and reinforce the pricing model ({request.pricing}).",
        f"Initial focus: orchestrate a {request.launch_horizon.lower()} launch train that blends product-led motions with strategic storytelling.",
    ])


def select_timeline(launch_horizon: str) -> tuple[str, ...]:
    horizon = launch_horizon.lower()
    for keywords, labels in playbook.TIMELINE_RULES:
        if _contains_any(horizon, keywords):
            return labels
    return playbook.DEFAULT_TIMELINE


def shape_launch_phases(launch_horizon: str) -> list[LaunchPhase]:
    """Lay the static phases onto the timeline implied by the horizon.

    A timeline longer than the base phases pulls in the Scale phase. Labels
    are positional; extra phases reuse the last label.
    """
    timeline = select_timeline(launch_horizon)
    phases = list(playbook.LAUNCH_PHASES)
    if len(timeline) > len(phases):
        phases.append(playbook.SCALE_PHASE)

    return [
        LaunchPhase(**phase, duration=timeline[min(index, len(timeline) - 1)])
        for index, phase in enumerate(phases)
    ]


def tailor_messaging(
    request: GTMRequest,
    personas: list[Mapping[str, Any]],
) -> list[MessagingPillar]:
    slots = {
        "problem": request.problem.lower(),
        "positioning": request.differentiation.lower(),
        "product_name": request.product_name,
    }
    pillars = [
        MessagingPillar(**{**pillar, "narrative": pillar["narrative"].format(**slots)})
        for pillar in playbook.MESSAGING_PILLARS
    ]

    if any(p["persona"] == playbook.BUILDER_PERSONA for p in personas):
        pillars.append(MessagingPillar(**playbook.BUILDER_PILLAR))

    return pillars


def adapt_channel_strategy(primary_goal: str) -> list[ChannelStrategy]:
    goal = primary_goal.lower()
    channels = []
    for play in playbook.CHANNEL_PLAYS[:playbook.MAX_CHANNELS]:
        role = play["role"]
        for keywords, channel_name, clause in playbook.CHANNEL_ROLE_ADAPTATIONS:
            if play["channel"] == channel_name and _contains_any(goal, keywords):
                role = f"{role} {clause}"
        channels.append(ChannelStrategy(**{**play, "role": role}))
    return channels


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------

def synthesize(request: GTMRequest) -> GTMResponse:
    """Map a validated intake record to a full go-to-market plan.

    Pure and total: the same request always yields the same plan.
    """
    personas = derive_personas(request.audience, request.primary_goal)

    return GTMResponse(
        executive_summary=craft_summary(request),
        launch_phases=shape_launch_phases(request.launch_horizon),
        persona_insights=[
            PersonaInsight(
                persona=p["persona"],
                core_needs=p["needs"],
                adoption_triggers=p["triggers"],
                objections=p["objections"],
            )
            for p in personas
        ],
        messaging_pillars=tailor_messaging(request, personas),
        channel_strategy=adapt_channel_strategy(request.primary_goal),
        growth_experiments=[GrowthExperiment(**e) for e in playbook.GROWTH_EXPERIMENTS],
        measurement_framework=[MeasurementMetric(**m) for m in playbook.MEASUREMENT_FRAMEWORK],
    )


run_go_to_market_agent = synthesize


class GoToMarketAgent:
    """Intake → plan, with validation and run logging.

    Mirrors the shape of the other pipeline agents (name, slug,
    description, ``run``) but never calls an LLM.
    """

    name: str = "Go-To-Market Strategist"
    slug: str = "gtm_strategist"
    description: str = (
        "Synthesizes persona insights, narrative pillars, channel motions, "
        "and launch experiments from product context."
    )

    def __init__(self):
        self.logger = logging.getLogger(f"agent.{self.slug}")

    def build_request(self, inputs: Mapping[str, Any]) -> GTMRequest:
        """Validate raw camelCase inputs and build the intake record."""
        missing = missing_required_fields(inputs)
        if missing:
            self.logger.warning("Intake rejected, missing fields: %s", missing)
            raise PlanValidationError(missing)
        return GTMRequest.model_validate(
            {field: inputs[field] for field in REQUIRED_FIELDS}
        )

    def run(self, inputs: Mapping[str, Any]) -> GTMResponse:
        """Execute: validate → synthesize → return."""
        request = self.build_request(inputs)
        self.logger.info("=== %s starting [%s] ===", self.name, request.product_name)
        start = time.time()

        plan = synthesize(request)

        elapsed = time.time() - start
        self.logger.info(
            "Personas: %s | phases: %d | pillars: %d",
            ", ".join(p.persona for p in plan.persona_insights),
            len(plan.launch_phases),
            len(plan.messaging_pillars),
        )
        self.logger.info("=== %s finished in %.3fs ===", self.name, elapsed)
        return plan
