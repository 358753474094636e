"""Static guidance shown next to the calculator results."""

TITLE = "Protein Needs Calculator"
SUBTITLE = "Daily protein estimate based on body weight and goal. Not a substitute for medical advice."

TIPS = (
    "For per-meal muscle protein synthesis, a common heuristic is ~0.25 g/kg per meal "
    "or 20-40 g of protein per serving (higher in older adults)."
)

MPS_NOTE = "MPS heuristic / per meal: 0.25 g/kg"

ESTIMATE_NOTE = "Note: this is an estimate. Consult a professional if you have a medical condition."

REFERENCES = (
    "RDA for healthy adults: ~0.8 g/kg.",
    "Athletes / strength: 1.4-2.0 g/kg (ISSN review).",
    "Older adults: 1.0-1.2 g/kg recommended to prevent sarcopenia.",
    "AMDR for protein: 10-35% of total calories.",
)

DISCLAIMER = (
    "Disclaimer: this tool provides a general estimate and is not a substitute "
    "for advice from a doctor or dietitian."
)


def reference_payload() -> dict:
    return {
        "title": TITLE,
        "subtitle": SUBTITLE,
        "tips": TIPS,
        "mps_note": MPS_NOTE,
        "estimate_note": ESTIMATE_NOTE,
        "references": list(REFERENCES),
        "disclaimer": DISCLAIMER,
    }
