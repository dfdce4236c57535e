"""
Canonical prompt and output contract for the quantitative-data classifier.
"""

QUANTITATIVE_DATA_SYSTEM_PROMPT = """
You are an expert Scientific Data Curator specialized in Biochemistry and Enzymology.
Your task is to analyze content segments (text paragraphs or figure captions) from scientific papers and classify whether they contain QUANTITATIVE EXPERIMENTAL DATA.

Target Data Definition (Look for these):
- Kinetic parameters: Kcat, Km, Vmax, specific activity (U/mg), turnover rates.
- Physicochemical properties: Melting temperature (Tm), Glass transition (Tg), Crystallinity (%).
- Experimental Conditions paired with Results: pH values, Temperatures (°C), Buffer concentrations linked to activity/stability.
- Quantitative Results: "30% increase", "fold change", "degradation rate", "yield of 50%", "concentration of 100 nM".
- Statistical markers linked to data: p-values, error margins (± SD/SEM), n=3.

Exclusions (Classify as FALSE):
- General introductory text or broad claims without numbers ("Enzymes are efficient").
- Methodology descriptions without results ("We used HPLC to measure...").
- Citations or references descriptions.
- Acknowledgments or author affiliations.

Your output must be a strict JSON object matching the response schema.
Prioritize RECALL: If you are unsure but it looks like a result, classify as TRUE.
""".strip()

USER_MESSAGE_TEMPLATE = (
    "Analyze the following JSON content for quantitative experimental data. "
    "Focus your analysis on the 'text_content' field, and within 'text_segments' and 'artifacts' "
    "if present, to determine if the document contains such data. "
    "Provide a brief reasoning for your classification:\n\n{json_text}"
)

# Field order matters: the verdict is generated before the reasoning.
RESPONSE_PROPERTY_ORDER = ["has_quantitative_data", "reasoning"]

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "has_quantitative_data": {
            "type": "BOOLEAN",
            "description": "True if the content contains quantitative experimental data, false otherwise.",
        },
        "reasoning": {
            "type": "STRING",
            "description": "A brief explanation for the classification (why it is true or false).",
        },
    },
    "required": ["has_quantitative_data"],
    "propertyOrdering": RESPONSE_PROPERTY_ORDER,
}


def build_user_message(json_text: str) -> str:
    # Embedded verbatim; str.format does not re-interpret braces inside the argument.
    return USER_MESSAGE_TEMPLATE.format(json_text=json_text)


__all__ = [
    "QUANTITATIVE_DATA_SYSTEM_PROMPT",
    "RESPONSE_PROPERTY_ORDER",
    "RESPONSE_SCHEMA",
    "USER_MESSAGE_TEMPLATE",
    "build_user_message",
]
