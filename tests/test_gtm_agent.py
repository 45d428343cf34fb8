from __future__ import annotations

import json
import unittest
from unittest.mock import patch

from pipeline import gtm_agent
from pipeline import gtm_playbook as playbook
from pipeline.gtm_agent import (
    GoToMarketAgent,
    PlanValidationError,
    adapt_channel_strategy,
    craft_summary,
    derive_personas,
    select_timeline,
    shape_launch_phases,
    synthesize,
    tailor_messaging,
)
from schemas.gtm_plan import GTMRequest


def _request(**overrides) -> GTMRequest:
    base = {
        "productName": "OrbitOps Agent Studio",
        "productSummary": "An agentic workspace for launch teams",
        "audience": "AI product leads at Series B+ SaaS companies",
        "problem": "Fragmented AI Experimentation",
        "differentiation": "Fuse Product Telemetry with CRM data",
        "pricing": "Usage-based with premium tier",
        "brandVoice": "Confident, Strategic",
        "primaryGoal": "Win Mindshare",
        "successMetric": "50 SQLs in 90 days",
        "launchHorizon": "90-day orchestrated launch",
    }
    base.update(overrides)
    return GTMRequest.model_validate(base)


def _persona_names(personas) -> list[str]:
    return [p["persona"] for p in personas]


class PersonaSelectionTests(unittest.TestCase):
    def test_developer_founders_select_builder(self):
        personas = derive_personas("Indie developer founders", "drive activation")
        self.assertEqual(_persona_names(personas), ["Hands-on Builder"])

    def test_marketing_audience_with_pipeline_goal_selects_operator(self):
        personas = derive_personas("Marketing leaders", "grow pipeline")
        self.assertEqual(_persona_names(personas), ["Growth Operator"])

    def test_no_keywords_fall_back_to_operator_only(self):
        personas = derive_personas("Hospital procurement teams", "win mindshare")
        self.assertEqual(_persona_names(personas), ["Growth Operator"])

    def test_multiple_matches_keep_fixed_order(self):
        personas = derive_personas(
            "C-Suite execs and developer advocates at growth-stage startups",
            "land enterprise logos",
        )
        self.assertEqual(
            _persona_names(personas),
            ["Hands-on Builder", "Growth Operator", "Strategic Executive"],
        )

    def test_goal_keywords_trigger_operator_and_executive(self):
        personas = derive_personas("Procurement teams", "Enterprise pipeline expansion")
        self.assertEqual(_persona_names(personas), ["Growth Operator", "Strategic Executive"])

    def test_matching_is_plain_substring_containment(self):
        self.assertEqual(
            _persona_names(derive_personas("Cofounders of seed startups", "win mindshare")),
            ["Hands-on Builder"],
        )
        # "enterprising" does not contain "enterprise"
        self.assertEqual(
            _persona_names(derive_personas("Buyers", "reach enterprising startups")),
            ["Growth Operator"],
        )


class LaunchPhaseTests(unittest.TestCase):
    def test_default_horizon_has_three_generic_phases(self):
        phases = shape_launch_phases("90-day orchestrated launch")
        self.assertEqual([p.name for p in phases], ["Ignition", "Amplify", "Convert"])
        self.assertEqual([p.duration for p in phases], ["Phase 1", "Phase 2", "Phase 3"])

    def test_thirty_day_horizon_uses_week_labels(self):
        phases = shape_launch_phases("30-day lightning launch")
        self.assertEqual([p.duration for p in phases], ["Week 0-2", "Week 3-4", "Week 5-8"])

    def test_month_horizon_uses_week_labels(self):
        phases = shape_launch_phases("6-month enterprise motion")
        self.assertEqual(len(phases), 3)
        self.assertEqual(phases[0].duration, "Week 0-2")

    def test_quarter_horizon_appends_scale_phase(self):
        phases = shape_launch_phases("One Quarter rollout")
        self.assertEqual(
            [p.name for p in phases], ["Ignition", "Amplify", "Convert", "Scale"]
        )
        self.assertEqual(
            [p.duration for p in phases], ["Month 0-1", "Month 2", "Month 3", "Month 4+"]
        )

    def test_month_keyword_takes_precedence_over_quarter(self):
        self.assertEqual(select_timeline("quarter-by-month rollout"), ("Week 0-2", "Week 3-4", "Week 5-8"))
        self.assertEqual(len(shape_launch_phases("quarter-by-month rollout")), 3)

    def test_last_label_repeats_when_phases_outnumber_labels(self):
        with patch.object(playbook, "DEFAULT_TIMELINE", ("Sprint A", "Sprint B")):
            phases = shape_launch_phases("whenever we are ready")
        self.assertEqual([p.duration for p in phases], ["Sprint A", "Sprint B", "Sprint B"])

    def test_phase_content_is_static(self):
        phases = shape_launch_phases("One quarter")
        self.assertEqual(phases[0].primary_plays, list(playbook.LAUNCH_PHASES[0]["primary_plays"]))
        self.assertEqual(phases[3].proof_points, list(playbook.SCALE_PHASE["proof_points"]))


class MessagingTests(unittest.TestCase):
    def test_three_pillars_interpolate_request_fields(self):
        request = _request()
        pillars = tailor_messaging(request, derive_personas(request.audience, request.primary_goal))

        self.assertEqual(
            [p.pillar for p in pillars],
            ["Operational Precision", "Revenue Impact", "Differentiated Advantage"],
        )
        self.assertEqual(
            pillars[0].narrative,
            "Automate the manual grind behind fragmented ai experimentation with orchestrated AI workflows.",
        )
        self.assertEqual(
            pillars[1].narrative,
            "Translate OrbitOps Agent Studio's intelligence into measurable revenue outcomes.",
        )
        self.assertEqual(
            pillars[2].narrative,
            "Show how we fuse product telemetry with crm data so customers stay ahead of rivals.",
        )

    def test_builder_persona_adds_builder_velocity(self):
        request = _request(audience="Indie developer founders", primaryGoal="drive activation")
        pillars = tailor_messaging(request, derive_personas(request.audience, request.primary_goal))
        self.assertEqual(len(pillars), 4)
        self.assertEqual(pillars[-1].pillar, "Builder Velocity")
        self.assertEqual(pillars[-1].narrative, "Empower builders to ship AI workflows safely, fast.")

    def test_braces_in_user_text_are_kept_verbatim(self):
        request = _request(problem="Templating {user} names", productName="Acme {beta}")
        pillars = tailor_messaging(request, [])
        self.assertIn("templating {user} names", pillars[0].narrative)
        self.assertIn("Acme {beta}'s intelligence", pillars[1].narrative)


class ChannelStrategyTests(unittest.TestCase):
    def _roles(self, channels) -> dict[str, str]:
        return {c.channel: c.role for c in channels}

    def _base_roles(self) -> dict[str, str]:
        return {c["channel"]: c["role"] for c in playbook.CHANNEL_PLAYS}

    def test_pipeline_goal_adds_co_selling_to_alliances_only(self):
        roles = self._roles(adapt_channel_strategy("Generate qualified pipeline"))
        base = self._base_roles()

        self.assertEqual(
            roles["Strategic Alliances"],
            base["Strategic Alliances"] + " Prioritize co-selling motions for revenue acceleration.",
        )
        for name in ("Founders' Narrative", "Product-Led Motion", "Category Community"):
            self.assertEqual(roles[name], base[name])

    def test_activation_goal_adds_onboarding_to_product_led_only(self):
        roles = self._roles(adapt_channel_strategy("Increase activation"))
        base = self._base_roles()

        self.assertEqual(
            roles["Product-Led Motion"],
            base["Product-Led Motion"] + " Double down on aha moments and guided onboarding.",
        )
        for name in ("Founders' Narrative", "Category Community", "Strategic Alliances"):
            self.assertEqual(roles[name], base[name])

    def test_unrelated_goal_leaves_roles_unchanged(self):
        channels = adapt_channel_strategy("Win mindshare")
        self.assertEqual(len(channels), 4)
        self.assertEqual(self._roles(channels), self._base_roles())
        self.assertEqual(
            [c.channel for c in channels],
            ["Founders' Narrative", "Product-Led Motion", "Category Community", "Strategic Alliances"],
        )

    def test_both_clauses_apply_together(self):
        roles = self._roles(adapt_channel_strategy("Revenue through ADOPTION"))
        self.assertTrue(roles["Strategic Alliances"].endswith("revenue acceleration."))
        self.assertTrue(roles["Product-Led Motion"].endswith("guided onboarding."))

    def test_static_channel_table_is_not_mutated(self):
        before = self._base_roles()
        adapt_channel_strategy("pipeline and activation")
        self.assertEqual(self._base_roles(), before)


class SummaryTests(unittest.TestCase):
    def test_summary_template(self):
        summary = craft_summary(_request())
        self.assertEqual(
            summary,
            "Launch mission: OrbitOps Agent Studio will win mindshare. "
            "We anchor messaging around the core product promise — An agentic workspace for launch teams. "
            "Tone must stay confident, strategic while dramatizing the problem: Fragmented AI Experimentation. "
            "We lead with proof on how we fuse product telemetry with crm data and reinforce the pricing model "
            "(Usage-based with premium tier). "
            "Initial focus: orchestrate a 90-day orchestrated launch launch train that blends product-led "
            "motions with strategic storytelling.",
        )


class SynthesizeTests(unittest.TestCase):
    def test_synthesize_is_deterministic(self):
        first = synthesize(_request()).model_dump_json(by_alias=True)
        second = synthesize(_request()).model_dump_json(by_alias=True)
        self.assertEqual(first, second)

    def test_static_tables_are_identical_across_inputs(self):
        a = synthesize(_request())
        b = synthesize(
            _request(
                audience="Developer founders",
                primaryGoal="Enterprise revenue",
                launchHorizon="Next quarter",
            )
        )
        self.assertEqual(a.growth_experiments, b.growth_experiments)
        self.assertEqual(a.measurement_framework, b.measurement_framework)
        self.assertEqual(
            [e.title for e in a.growth_experiments],
            ["Persona-Calibrated Onboarding Concierge", "Narrative Velocity Series", "AI Pilot Sprint Rooms"],
        )
        self.assertEqual(
            [m.metric for m in a.measurement_framework],
            ["Activation Velocity", "Pipeline Momentum", "Expansion Signal", "Advocacy Flywheel"],
        )

    def test_persona_insights_mirror_archetypes(self):
        plan = synthesize(_request(audience="Developer founders"))
        builder = playbook.PERSONA_ARCHETYPES["builder"]
        insight = plan.persona_insights[0]
        self.assertEqual(insight.persona, "Hands-on Builder")
        self.assertEqual(insight.core_needs, list(builder["needs"]))
        self.assertEqual(insight.adoption_triggers, list(builder["triggers"]))
        self.assertEqual(insight.objections, list(builder["objections"]))

    def test_payload_uses_camel_case_keys(self):
        payload = synthesize(_request(launchHorizon="Q1 quarter")).to_payload()
        self.assertEqual(
            list(payload),
            [
                "executiveSummary",
                "launchPhases",
                "personaInsights",
                "messagingPillars",
                "channelStrategy",
                "growthExperiments",
                "measurementFramework",
            ],
        )
        self.assertIn("primaryPlays", payload["launchPhases"][0])
        self.assertIn("adoptionTriggers", payload["personaInsights"][0])
        self.assertIn("contentAngles", payload["messagingPillars"][0])
        self.assertIn("kpis", payload["channelStrategy"][0])
        json.dumps(payload)

    def test_module_alias_points_at_synthesize(self):
        self.assertIs(gtm_agent.run_go_to_market_agent, synthesize)


class GoToMarketAgentTests(unittest.TestCase):
    def test_run_validates_and_reports_every_missing_field(self):
        inputs = _request().model_dump(by_alias=True)
        del inputs["pricing"]
        inputs["brandVoice"] = "   "

        with self.assertRaises(PlanValidationError) as ctx:
            GoToMarketAgent().run(inputs)
        self.assertEqual(ctx.exception.missing, ["pricing", "brandVoice"])
        self.assertIn("pricing, brandVoice", str(ctx.exception))

    def test_run_returns_plan_and_ignores_extra_fields(self):
        inputs = _request().model_dump(by_alias=True)
        inputs["utmSource"] = "newsletter"
        plan = GoToMarketAgent().run(inputs)
        self.assertEqual(plan, synthesize(_request()))

    def test_run_passes_values_through_untrimmed(self):
        inputs = _request().model_dump(by_alias=True)
        inputs["productName"] = "  Padded  "
        plan = GoToMarketAgent().run(inputs)
        self.assertTrue(plan.executive_summary.startswith("Launch mission:   Padded   will"))


if __name__ == "__main__":
    unittest.main()
