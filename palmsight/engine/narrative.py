"""Narrative builders — long-form reading text from conditional sentence fragments.

Every builder produces an ordered list of sentences from score thresholds and
mount lookups, then hands it to ``compose_paragraph`` which pads short lists
with a generic closing sentence and truncates long ones.
"""

from __future__ import annotations

from palmsight.engine.config import EngineConfig
from palmsight.engine.context import ChakraProfile, Guna, LineAnalysis, MountAnalysis, Recommendations

_DEFAULT_CONFIG = EngineConfig()

PADDING_SENTENCE = "Overall, these patterns suggest steady growth when you follow consistent habits."

LINE_SIGNIFICANCE = {
    "life": "Vitality and life force indicators.",
    "head": "Intellect and decision-making patterns.",
    "heart": "Emotional style and relationship capacity.",
    "fate": "Career & life-direction markers.",
}


def compose_paragraph(sentences: list[str], config: EngineConfig | None = None) -> str:
    """Join sentences, padding to the minimum count and truncating at the maximum."""
    cfg = config or _DEFAULT_CONFIG
    padded = list(sentences)
    while len(padded) < cfg.paragraph_min_sentences:
        padded.append(PADDING_SENTENCE)
    return " ".join(padded[: cfg.paragraph_max_sentences])


def prominent_mount(mounts: dict[str, MountAnalysis]) -> tuple[str, MountAnalysis] | None:
    """Highest-scoring mount; ties go to the earlier mount in reporting order."""
    if not mounts:
        return None
    return sorted(mounts.items(), key=lambda item: -item[1].score)[0]


# ── Per-line messages ──


def line_message(line_name: str, analysis: LineAnalysis, config: EngineConfig | None = None) -> str:
    cfg = config or _DEFAULT_CONFIG
    parts: list[str] = []
    if analysis.strength == "strong":
        parts.append(f"{line_name} is strong and well-defined.")
        parts.append("This represents a reliable and stable quality in that area.")
    elif analysis.strength == "moderate":
        parts.append(f"{line_name} is present with normal variation.")
        parts.append("This indicates capability, with periodic variability.")
    else:
        parts.append(f"{line_name} is faint or fragmented in parts.")
        parts.append("This points to an area that benefits from intentional care and routine.")

    if analysis.breaks > 0:
        parts.append(
            f"Detected {analysis.breaks} small break(s) — often temporary stress points "
            "or transitions rather than permanent problems."
        )
    else:
        parts.append("No notable breaks were detected, suggesting steady development.")

    if analysis.score >= cfg.insight_high_score:
        parts.append("Overall: a strong and consistent sign.")
    elif analysis.score >= cfg.insight_low_score:
        parts.append("Overall: functional with clear opportunities for growth.")
    else:
        parts.append("Overall: focus on building steady habits in this area.")
    return " ".join(parts)


def fate_line_message(analysis: LineAnalysis) -> str:
    parts: list[str] = []
    if analysis.strength == "strong":
        parts.append(
            "The Fate Line is strong and continuous, indicating a clear and sustained sense "
            "of direction in your public life and responsibilities."
        )
    elif analysis.strength == "moderate":
        parts.append(
            "The Fate Line is present but not dominant; it suggests a life path that is "
            "influenced both by your choices and external circumstances."
        )
    else:
        parts.append(
            "The Fate Line is faint or interrupted, which commonly reflects changes in career, "
            "relocations, or shifts in priorities rather than an absence of purpose."
        )
    parts.append(
        "In palm tradition this line maps to career paths, public roles, and how external "
        "events shape your journey; it offers a practical map rather than fixed destiny."
    )
    if analysis.breaks > 0:
        parts.append(
            f"We detected {analysis.breaks} break(s) which typically mark transition periods — "
            "job switches, new responsibilities, or personal reinvention phases."
        )
    else:
        parts.append("A continuous line suggests longer periods of stability in vocation or life calling.")
    if analysis.forks > 0:
        parts.append(
            "Forks or splits suggest that at some key moments you had several viable directions; "
            "these are opportunities rather than failures."
        )
    parts.append(
        "Takeaway: treat this line as a guide for timing and pivoting — deliberate choices "
        "and preparation influence outcomes strongly."
    )
    return " ".join(parts)


# ── Long-form sections ──


def personality_text(
    life: LineAnalysis,
    heart: LineAnalysis,
    head: LineAnalysis,
    mounts: dict[str, MountAnalysis],
    guna: Guna,
    config: EngineConfig | None = None,
) -> str:
    s = ["Your personality profile shows a steady core with layered tendencies that shape how you act, think, and relate."]

    if life.strength == "strong":
        s.append("You demonstrate reliable energy and resilience; when you commit to a path you follow through consistently.")
    else:
        s.append("Energy fluctuates across your days; you perform best when you follow a structured routine that conserves and renews energy.")

    if head.strength == "strong":
        s.append("Your thinking is clear and decisive; you can analyze details and make timely decisions.")
    else:
        s.append("You are practical and grounded in thought; focusing on small steps helps you avoid overload and improves decision making.")

    if heart.strength == "strong":
        s.append("Emotionally, you are engaged and warm; you connect deeply with people and sustain long-term bonds.")
    else:
        s.append("You tend to be cautious with emotional expression and often choose stability and loyalty over immediate openness.")

    top = prominent_mount(mounts)
    if top:
        name, mount = top
        traits = " and ".join(mount.characteristics[:2])
        s.append(
            f"A prominent influence from {name.capitalize()} (score {mount.score}) colors your temperament — "
            f"it gives you specific strengths such as {traits}."
        )

    if guna == "sattva":
        s.append("Sattva-dominant features show a tendency toward clarity, learning, and a balanced outlook.")
    elif guna == "rajas":
        s.append("Rajas-dominant features show activity, ambition and a drive for visible results.")
    else:
        s.append("Tamas-dominant features show a patient, practical, and sometimes inward nature emphasizing stability.")

    if life.breaks > 0 or head.breaks > 0:
        s.append("Under stress you may withdraw into routines; intentional short resets (breathing, short walks) are highly effective.")
    else:
        s.append("You recover well from pressure and generally restore balance swiftly with simple routines.")

    s.append("A practical practice that helps you: weekly review + a small creativity or learning goal each month to keep momentum and prevent stagnation.")
    s.append("In groups you are seen as dependable and pragmatic; people look to you for steady counsel and realistic planning.")
    s.append("Overall: steady, capable, and growth-oriented — use small consistent practices to amplify your natural strengths.")
    return compose_paragraph(s, config)


def health_text(
    life: LineAnalysis,
    head: LineAnalysis,
    mounts: dict[str, MountAnalysis],
    config: EngineConfig | None = None,
) -> str:
    cfg = config or _DEFAULT_CONFIG
    s = ["Your health profile indicates baseline resilience with specific areas that respond strongly to routine."]
    if life.strength == "strong":
        s.append("Physically you have good stamina and bounce back from short-term fatigue.")
    else:
        s.append("Energy management is critical for you; consistent sleep and nutrition make disproportionate improvements.")

    s.append(
        "Digestive, sleep, and immune markers are sensitive to stress in your profile — "
        "when pressure rises, these systems may show first signs of imbalance."
    )
    if mounts["saturn"].score > cfg.insight_high_score:
        s.append("Saturn influence hints at the need for regular rest and slow, steady recovery rather than high-pressure sprints.")
    if mounts["mercury"].score < cfg.insight_low_score:
        s.append("Lower Mercury suggests practicing brief mental breaks and communication around stress rather than internalizing it.")

    if head.strength == "weak":
        s.append("Mental clarity maps with head-line strength; short concentration practices (10-15 minutes) raise daily performance significantly.")
    else:
        s.append("Mental clarity maps with head-line strength, and yours supports focused work; protect it with regular pauses.")
    s.append("Simple daily habits — morning hydration, short walks, and a 5-10 minute breathing routine — create large compound benefits for you.")
    s.append(
        "If you have chronic concerns, combine palm insights with medical testing; the palm helps "
        "prioritize what to monitor rather than replace diagnostics."
    )
    s.append("Prevention is your most powerful tool: consistent small actions beat intermittent large fixes.")
    s.append("Long-term plan: pick one small health habit for 30 days, then add the next; this builds sustainable resilience and fits your personality.")
    s.append("Overall: your body responds well to regularity and small daily investments — invest in routines and you will see steady improvements.")
    return compose_paragraph(s, cfg)


def career_text(
    mounts: dict[str, MountAnalysis],
    fate: LineAnalysis,
    config: EngineConfig | None = None,
) -> str:
    cfg = config or _DEFAULT_CONFIG
    s = ["Your career profile blends steady reliability with moments where deliberate pivoting produces the largest gains."]

    if mounts["sun"].score > cfg.insight_high_score:
        s.append("A strong Sun mount indicates a talent for visibility, leadership, or creative roles that show your work to others.")
    if mounts["mercury"].score > cfg.insight_high_score:
        s.append("A strong Mercury suggests abilities in communication, business, writing, or trades that require adaptability and quick learning.")
    if mounts["jupiter"].score > cfg.insight_high_score:
        s.append("Jupiter prominence suits teaching, mentorship, or roles where long-term planning and guidance are valued.")

    s.append(
        "The Fate Line gives context: a continuous fate line supports steady promotion, while breaks "
        "suggest intentional re-skilling or role changes at key ages."
    )
    if fate.breaks > 0:
        s.append(
            f"Detected {fate.breaks} break(s) in the Fate line — plan transitions with a 3-6 month buffer "
            "and treat them as intentional pivots rather than crises."
        )

    s.append("Your best fit: roles combining structure and creative problem solving — project leadership in technical or strategic areas fits particularly well.")
    s.append("For immediate action: identify one high-impact skill you can learn in 3 months and one mentor-type person to provide feedback.")
    s.append(
        "For salary and recognition: measure quarterly wins and build a short portfolio of concrete outcomes; "
        "this turns consistent delivery into visible career currency."
    )
    s.append("Avoid quick changes without skill alignment — your profile favors staged growth and evidence-based pivots.")
    s.append("Overall: steady growth with strategic, planned transitions will maximize both satisfaction and recognition over time.")
    return compose_paragraph(s, cfg)


def relationships_text(
    heart: LineAnalysis,
    mounts: dict[str, MountAnalysis],
    config: EngineConfig | None = None,
) -> str:
    cfg = config or _DEFAULT_CONFIG
    s = ["Your relational profile values trust, reliability, and clarity of expectations."]

    if heart.strength == "strong":
        s.append("You experience depth in relationships and invest in long-term bonds; you show care through actions and consistency.")
    else:
        s.append("You may appear reserved initially and prefer to show commitment through steady presence rather than immediate emotional displays.")

    s.append(
        "Conflict style: you tend to manage problems practically; when under stress, you may prioritize "
        "solutions over emotional expression — this helps with logistics but sometimes leaves emotional needs unspoken."
    )
    s.append(
        "Small daily practices (naming one feeling, expressing one appreciation each day) significantly "
        "increase intimacy and reduce misunderstandings."
    )
    if mounts["venus"].score > cfg.insight_high_score:
        s.append("A strong Venus mount enhances warmth, attraction, and creative expression in partnerships.")
    if mounts["moon"].score > cfg.insight_high_score:
        s.append("A strong Moon heightens sensitivity and emotional responsiveness; prioritize clear communication to prevent overwhelm.")

    s.append(
        "If relationship challenges appear, targeted work on communication patterns yields the fastest "
        "improvements: structured check-ins, active listening, and small shared rituals."
    )
    s.append("For long-term partnership: clarity in roles, shared routines, and honesty about expectations create durable bonds for you.")
    s.append(
        "Overall: you are dependable and committed — practicing small vulnerability steps deepens intimacy "
        "without destabilizing your natural steadiness."
    )
    return compose_paragraph(s, cfg)


def spirituality_text(
    chakras: ChakraProfile,
    mounts: dict[str, MountAnalysis],
    config: EngineConfig | None = None,
) -> str:
    s = [
        "Your spiritual profile is pragmatic and inward-facing: you prefer practices that produce "
        "practical inner change rather than symbolic rituals."
    ]

    if mounts["jupiter"].score > mounts["saturn"].score:
        s.append("A Jupiter tilt points to an intellectual curiosity — study, reflection, and philosophical reading deepen your sense of meaning.")
    if mounts["moon"].score > mounts["mercury"].score:
        s.append("A Moon tilt suggests a path that is felt more than analyzed — journaling, reflective retreats, and devotional practices resonate.")

    s.append(
        "Chakra map reveals where energy is steady and where focused practice yields results; "
        "low-scoring areas are practical places to start targeted exercises."
    )
    s.append(f"Chakra summary: {chakras.summary}.")
    s.append("Short daily practices (5-10 minutes) are far more effective for you than sporadic long sessions; this supports integration into busy life.")
    s.append("When you face doubts, treat them as information rather than failure: experiment with small practices for a month and observe changes.")
    s.append("Combine study with service: learning plus real-world application anchors spiritual insights into daily life.")
    s.append(
        "Over time, these small daily actions accumulate into deeper inner stability and clearer values; "
        "the palm suggests sustainable, long-term growth rather than sudden awakenings."
    )
    s.append(
        "Overall: a practical, evidence-based spiritual approach fits you best — consistent practice, "
        "inquiry, and service will yield steady inner progress."
    )
    return compose_paragraph(s, config)


def guidance_text(remedies: Recommendations, config: EngineConfig | None = None) -> str:
    s = ["Guidance is tactical and time-based: immediate steps should be short, measurable, and easy to repeat daily."]
    s.append(f"Immediate: {'; '.join(remedies.immediate[:3])}.")
    s.append(f"Short-term: {'; '.join(remedies.short_term[:3])}.")
    s.append(f"Long-term: {'; '.join(remedies.long_term[:3])}.")
    s.append("Spiritual practices: keep them short and practical — brief daily reflection and occasional deeper sessions work best.")
    s.append("When planning change, prefer staged experiments (3 months) and measure outcomes; small wins compound into major life shifts.")
    s.append("Avoid dramatic overhauls unless you have clear support systems; incremental change is far more sustainable for lasting growth.")
    s.append("For accountability, use weekly reviews, a mentor, or a peer group to course-correct quickly.")
    s.append(
        "Overall: choose small consistent actions, measure results, and treat change as a sequence of "
        "intentional pivots rather than a single event."
    )
    return compose_paragraph(s, config)
