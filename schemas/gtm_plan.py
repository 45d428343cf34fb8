"""Go-to-market plan schemas — intake request and synthesized plan.

The web form posts camelCase JSON, so every model here serializes with
camelCase aliases while exposing snake_case attributes to Python code.

Stable keys:
  executiveSummary, launchPhases[], personaInsights[], messagingPillars[],
  channelStrategy[], growthExperiments[], measurementFramework[]
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Intake
# ---------------------------------------------------------------------------

REQUIRED_FIELDS: tuple[str, ...] = (
    "productName",
    "productSummary",
    "audience",
    "problem",
    "differentiation",
    "pricing",
    "brandVoice",
    "primaryGoal",
    "successMetric",
    "launchHorizon",
)


class GTMRequest(_CamelModel):
    """Structured product-marketing inputs collected by the intake form."""

    model_config = ConfigDict(frozen=True)

    product_name: str = Field(..., description="e.g. 'OrbitOps Agent Studio'")
    product_summary: str = Field(..., description="Core promise of the product")
    audience: str = Field(..., description="Who the launch targets")
    problem: str = Field(..., description="Problem the product solves")
    differentiation: str = Field(..., description="Why the product wins")
    pricing: str = Field(..., description="Pricing motion")
    brand_voice: str = Field(..., description="e.g. 'Confident, strategic'")
    primary_goal: str = Field(..., description="e.g. 'Generate qualified pipeline'")
    success_metric: str = Field(..., description="North star metric")
    launch_horizon: str = Field(..., description="e.g. '90-day orchestrated launch'")


def missing_required_fields(payload: Mapping[str, Any] | None) -> list[str]:
    """Return every required field that is absent, not a string, or blank.

    Names come back in canonical form order so the caller can fix them all
    at once.
    """
    payload = payload or {}
    missing = []
    for field in REQUIRED_FIELDS:
        value = payload.get(field)
        if not isinstance(value, str) or not value.strip():
            missing.append(field)
    return missing


# ---------------------------------------------------------------------------
# Plan components
# ---------------------------------------------------------------------------

class LaunchPhase(_CamelModel):
    name: str
    focus: str
    primary_plays: list[str] = Field(default_factory=list)
    proof_points: list[str] = Field(default_factory=list)
    duration: str = Field(..., description="Timeline label, e.g. 'Week 0-2'")


class PersonaInsight(_CamelModel):
    """A buyer archetype with its needs, adoption triggers and objections."""
    persona: str
    core_needs: list[str] = Field(default_factory=list)
    adoption_triggers: list[str] = Field(default_factory=list)
    objections: list[str] = Field(default_factory=list)


class MessagingPillar(_CamelModel):
    pillar: str
    narrative: str
    content_angles: list[str] = Field(default_factory=list)
    proof_assets: list[str] = Field(default_factory=list)


class ChannelStrategy(_CamelModel):
    channel: str
    role: str
    cadences: list[str] = Field(default_factory=list)
    kpis: list[str] = Field(default_factory=list)


class GrowthExperiment(_CamelModel):
    title: str
    hypothesis: str
    playbook: list[str] = Field(default_factory=list)
    measure: str


class MeasurementMetric(_CamelModel):
    metric: str
    target: str
    instrumentation: str
    cadence: str


# ---------------------------------------------------------------------------
# Top-level output
# ---------------------------------------------------------------------------

class GTMResponse(_CamelModel):
    """Complete go-to-market plan returned to the results view."""

    executive_summary: str
    launch_phases: list[LaunchPhase] = Field(default_factory=list)
    persona_insights: list[PersonaInsight] = Field(default_factory=list)
    messaging_pillars: list[MessagingPillar] = Field(default_factory=list)
    channel_strategy: list[ChannelStrategy] = Field(default_factory=list)
    growth_experiments: list[GrowthExperiment] = Field(default_factory=list)
    measurement_framework: list[MeasurementMetric] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict with the camelCase keys the frontend expects."""
        return self.model_dump(by_alias=True)
