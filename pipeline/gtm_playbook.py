"""Pre-authored go-to-market content blocks.

Every table is an immutable constant. The strategist selects and
interpolates these blocks; nothing here is personalized per request.
"""

from __future__ import annotations

from types import MappingProxyType

# ---------------------------------------------------------------------------
# Personas
# ---------------------------------------------------------------------------

PERSONA_ARCHETYPES = MappingProxyType({
    "builder": MappingProxyType({
        "persona": "Hands-on Builder",
        "needs": (
            "Rapid experimentation sandbox",
            "Composable APIs with excellent docs",
            "Signals that surface product-market fit faster",
        ),
        "triggers": (
            "Dev-first onboarding with minimal friction",
            "Proof of velocity — shipping hours, not weeks",
            "Community where peers share playbooks",
        ),
        "objections": (
            "Vendor lock-in or forced workflow changes",
            "Unclear pricing scale for high usage",
            "Slow support response for technical blockers",
        ),
    }),
    "operator": MappingProxyType({
        "persona": "Growth Operator",
        "needs": (
            "Clarity on ROI and payback period",
            "Confidence in data quality and governance",
            "Frictionless collaboration with GTM teams",
        ),
        "triggers": (
            "Success stories with hard revenue numbers",
            "Live dashboards with attribution guardrails",
            "Roadmap stability and SOC2/ISO compliance",
        ),
        "objections": (
            "Hidden costs in seats or limits",
            "Unproven integrations into current stack",
            "Concern about AI hallucinations in production",
        ),
    }),
    "executive": MappingProxyType({
        "persona": "Strategic Executive",
        "needs": (
            "Differentiated POV on market category",
            "Risk mitigation and governance controls",
            "Evidence of defensible moats",
        ),
        "triggers": (
            "Executive briefings benchmarking competitors",
            "Vision decks articulating future roadmap",
            "References from marquee customers",
        ),
        "objections": (
            "Unclear compliance posture",
            "Limited enterprise support coverage",
            "High switching cost from incumbents",
        ),
    }),
})

BUILDER_PERSONA = PERSONA_ARCHETYPES["builder"]["persona"]

# ---------------------------------------------------------------------------
# Launch phases
# ---------------------------------------------------------------------------

# Checked in order; the first rule whose keywords appear in the horizon wins.
TIMELINE_RULES = (
    (("30", "month"), ("Week 0-2", "Week 3-4", "Week 5-8")),
    (("quarter",), ("Month 0-1", "Month 2", "Month 3", "Month 4+")),
)
DEFAULT_TIMELINE = ("Phase 1", "Phase 2", "Phase 3")

LAUNCH_PHASES = (
    MappingProxyType({
        "name": "Ignition",
        "focus": "Pressure-test messaging, mobilize advocates, and orchestrate early storytelling assets.",
        "primary_plays": (
            "Calibrate positioning with lighthouse customers",
            "Ship teaser content + founder narrative threads",
            "Enable revenue teams with objection handling scripts",
        ),
        "proof_points": (
            "Vision deck with future-state architecture",
            "Design partner quotes and usage metrics",
        ),
    }),
    MappingProxyType({
        "name": "Amplify",
        "focus": "Scale demand generation with product-led growth loops and segment-specific campaigns.",
        "primary_plays": (
            "Automate nurture sequences triggered by product signals",
            "Launch category POV report featuring benchmark data",
            "Activate partners, communities, and paid acquisition pilots",
        ),
        "proof_points": (
            "Interactive ROI calculator tied to persona outcomes",
            "Video walkthroughs showing aha moments",
        ),
    }),
    MappingProxyType({
        "name": "Convert",
        "focus": "Collapse sales cycles, drive multi-threaded expansions, and reinforce social proof flywheel.",
        "primary_plays": (
            "Offer guided pilot sprints with solution engineers",
            "Publish customer spotlight + quantifiable wins",
            "Deploy executive workshops on AI governance and ROI",
        ),
        "proof_points": (
            "Case studies segmented by industry",
            "Stack diagrams with integration depth",
        ),
    }),
)

SCALE_PHASE = MappingProxyType({
    "name": "Scale",
    "focus": "Standardize playbooks, automate renewals, and unlock new monetization levers.",
    "primary_plays": (
        "Launch referral program with usage-based incentives",
        "Spin up user conference or digital summit",
        "Roll out roadmap updates with customer advisory boards",
    ),
    "proof_points": (
        "Land & expand dashboard with cohort analysis",
        "Public roadmap + changelog momentum",
    ),
})

# ---------------------------------------------------------------------------
# Messaging pillars
# ---------------------------------------------------------------------------

# Narrative placeholders: {problem} and {positioning} are lower-cased,
# {product_name} is used verbatim.
MESSAGING_PILLARS = (
    MappingProxyType({
        "pillar": "Operational Precision",
        "narrative": "Automate the manual grind behind {problem} with orchestrated AI workflows.",
        "content_angles": (
            "Before/after narratives illustrating time saved",
            "Deep dives on automation safeguards and governance",
            "Interactive dashboards revealing hidden bottlenecks",
        ),
        "proof_assets": (
            "Workflow teardown webinar",
            "Usage dashboards with leading indicators",
            "Checklist on AI guardrails and controls",
        ),
    }),
    MappingProxyType({
        "pillar": "Revenue Impact",
        "narrative": "Translate {product_name}'s intelligence into measurable revenue outcomes.",
        "content_angles": (
            "ROI case studies segmented by vertical",
            "Benchmarks sourced from aggregated product data",
            "Tools that forecast impact on core KPIs",
        ),
        "proof_assets": (
            "Outcome calculator with persona presets",
            "Slide library with quantifiable wins",
            "Customer testimonials with hard metrics",
        ),
    }),
    MappingProxyType({
        "pillar": "Differentiated Advantage",
        "narrative": "Show how we {positioning} so customers stay ahead of rivals.",
        "content_angles": (
            "Competitive teardown with objection counters",
            "Visionary roadmap articulating defensibility",
            "Partner stories illustrating ecosystem fit",
        ),
        "proof_assets": (
            "Comparison matrix with feature depth",
            "Executive briefing on category POV",
            "Joint announcements with strategic partners",
        ),
    }),
)

BUILDER_PILLAR = MappingProxyType({
    "pillar": "Builder Velocity",
    "narrative": "Empower builders to ship AI workflows safely, fast.",
    "content_angles": (
        "Stack diagrams explaining architecture choices",
        "Build-in-public showcases of rapid iteration",
        "Technical AMAs featuring product engineering",
    ),
    "proof_assets": (
        "Starter kits & templates library",
        "Reference implementations in GitHub",
        "Latency and uptime dashboards",
    ),
})

# ---------------------------------------------------------------------------
# Channels
# ---------------------------------------------------------------------------

MAX_CHANNELS = 4

CHANNEL_PLAYS = (
    MappingProxyType({
        "channel": "Founders' Narrative",
        "role": "Earn trust with a strong POV and demonstrate the vision behind the product.",
        "cadences": (
            "Bi-weekly build-in-public threads across LinkedIn + X",
            "Monthly founder letter unpacking roadmap signals",
            "Quarterly AMAs with flagship design partners",
        ),
        "kpis": ("Followers growth", "Thought leadership mentions", "Inbound demos"),
    }),
    MappingProxyType({
        "channel": "Product-Led Motion",
        "role": "Drive trials and activation through immersive product experiences.",
        "cadences": (
            "Interactive demo workspace refreshed every sprint",
            "Onboarding drip sequence tailored to role & use case",
            "In-app nudges calibrated to aha moments & milestones",
        ),
        "kpis": ("Signup-to-activation rate", "Time-to-first-value", "Feature adoption"),
    }),
    MappingProxyType({
        "channel": "Category Community",
        "role": "Mobilize believers and nurture advocacy loops.",
        "cadences": (
            "Weekly synthetic benchmarks distilled from anonymized data",
            "Fortnightly roundtables with lighthouse customers",
            "Slack/Discord crew with office hours from product & GTM leaders",
        ),
        "kpis": ("Net promoter score", "Community engagement", "Referral sourced pipeline"),
    }),
    MappingProxyType({
        "channel": "Strategic Alliances",
        "role": "Leverage partner ecosystems to tap into qualified demand.",
        "cadences": (
            "Co-marketing webinars aligned to partner roadmaps",
            "Solution briefings for partner SEs + AEs",
            "Joint ROI calculators highlighting combined value",
        ),
        "kpis": ("Partner influenced ARR", "Partner-sourced opportunities", "Attach rate"),
    }),
)

# (goal keywords, channel name, clause appended to that channel's role)
CHANNEL_ROLE_ADAPTATIONS = (
    (
        ("pipeline", "revenue"),
        "Strategic Alliances",
        "Prioritize co-selling motions for revenue acceleration.",
    ),
    (
        ("adoption", "activation"),
        "Product-Led Motion",
        "Double down on aha moments and guided onboarding.",
    ),
)

# ---------------------------------------------------------------------------
# Growth experiments & measurement
# ---------------------------------------------------------------------------

GROWTH_EXPERIMENTS = (
    MappingProxyType({
        "title": "Persona-Calibrated Onboarding Concierge",
        "hypothesis": (
            "If we detect the user's core job-to-be-done during onboarding, "
            "we can surface relevant templates and increase activation."
        ),
        "playbook": (
            "Create role-specific welcome flows with scripted prompts",
            "Instrument micro-surveys tied to first-session actions",
            "Route to nurture tracks featuring proof tied to persona needs",
        ),
        "measure": "Activation rate within first 7 days segmented by persona.",
    }),
    MappingProxyType({
        "title": "Narrative Velocity Series",
        "hypothesis": (
            "Launching a serialized content program that dramatizes customer "
            "wins will increase inbound demo requests."
        ),
        "playbook": (
            "Produce monthly hero stories with metrics-oriented infographics",
            "Distribute across LinkedIn, newsletter, and industry communities",
            "Add CTA to book a strategy workshop with solution consultants",
        ),
        "measure": "Demo volume, win rate, and sourced ARR from the campaign.",
    }),
    MappingProxyType({
        "title": "AI Pilot Sprint Rooms",
        "hypothesis": (
            "Facilitated sprints with success blueprints will collapse "
            "evaluation cycles for mid-market teams."
        ),
        "playbook": (
            "Spin up a Miro/FigJam board capturing sprint agenda and KPIs",
            "Bundle onboarding docs, governance checklist, and ROI calculator",
            "Assign a solutions engineer to co-build the first workflow",
        ),
        "measure": "Pilot-to-paid conversion and speed-to-contract.",
    }),
)

MEASUREMENT_FRAMEWORK = (
    MappingProxyType({
        "metric": "Activation Velocity",
        "target": "≥ 45% of signups reach aha moment within 72 hours",
        "instrumentation": "Product analytics funnel with persona & channel tags",
        "cadence": "Reviewed twice weekly with product + growth standup",
    }),
    MappingProxyType({
        "metric": "Pipeline Momentum",
        "target": "≥ 30% of SQL pipeline sourced from hero channels",
        "instrumentation": "CRM multi-touch attribution dashboard",
        "cadence": "Reported weekly to revenue leadership",
    }),
    MappingProxyType({
        "metric": "Expansion Signal",
        "target": "≥ 20% accounts adopt 2+ advanced workflows in 60 days",
        "instrumentation": "Usage cohort reports & health scoring in CS CRM",
        "cadence": "Monthly lifecycle business review",
    }),
    MappingProxyType({
        "metric": "Advocacy Flywheel",
        "target": "10 new public testimonials or case studies per quarter",
        "instrumentation": "Community tracking sheet + marketing automation tags",
        "cadence": "Monthly with marketing leadership",
    }),
)

# ---------------------------------------------------------------------------
# Intake form presets
# ---------------------------------------------------------------------------

BRAND_VOICE_PRESETS = (
    "Confident, strategic",
    "Bold, visionary",
    "Analytical, data-forward",
    "Friendly, community-driven",
)

LAUNCH_HORIZON_PRESETS = (
    "30-day lightning launch",
    "60-day layered rollout",
    "90-day orchestrated launch",
    "6-month enterprise motion",
)

FORM_DEFAULTS = MappingProxyType({
    "productName": "",
    "productSummary": "",
    "audience": "",
    "problem": "",
    "differentiation": "",
    "pricing": "",
    "brandVoice": BRAND_VOICE_PRESETS[0],
    "primaryGoal": "Generate qualified pipeline",
    "successMetric": "50 SQLs in 90 days",
    "launchHorizon": LAUNCH_HORIZON_PRESETS[2],
})
