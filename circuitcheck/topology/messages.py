"""Learner-facing feedback text for each failure code.

French is the reference language; any language without a translation
falls back to it.
"""

from __future__ import annotations

from circuitcheck.schemas.analysis import FailureCode

FALLBACK_LANGUAGE = "fr"

REASONS: dict[FailureCode, dict[str, str]] = {
    FailureCode.MISSING_COMPONENTS: {
        "fr": "Il manque des composants importants (pile, lampe ou interrupteur).",
        "en": "Some important components are missing (battery, lamp or switch).",
        "ar": "تنقص بعض المكونات المهمة (عمود، مصباح أو قاطع).",
    },
    FailureCode.SHORT_CIRCUIT: {
        "fr": "Attention, un composant court-circuité a été détecté ! ({component})",
        "en": "Warning, a short-circuited component was detected! ({component})",
        "ar": "انتبه، تم اكتشاف مكون في دارة قصيرة! ({component})",
    },
    FailureCode.LOOP_NOT_CLOSED: {
        "fr": (
            "Le circuit n'est pas correctement fermé ou un composant "
            "n'est pas relié en boucle."
        ),
        "en": (
            "The circuit is not properly closed or a component "
            "is not connected in the loop."
        ),
        "ar": "الدارة غير مغلقة بشكل صحيح أو أن أحد المكونات غير موصول في الحلقة.",
    },
}


def reason_text(code: FailureCode, language: str, **values: str) -> str:
    """Localized reason for ``code``, with ``{name}`` placeholders filled."""
    catalog = REASONS[code]
    text = catalog.get(language) or catalog[FALLBACK_LANGUAGE]
    for key, value in values.items():
        text = text.replace(f"{{{key}}}", value)
    return text
