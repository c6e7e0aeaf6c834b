"""
Gemini prompt factories.

Prompts are stateless: each takes only the user input it embeds and returns
the text part sent to the model.
"""

CLAIM_IMAGE_ONLY_PROMPT = "Analyze this image for news veracity"


def forensics_prompt() -> str:
    return (
        "Analyze this visual media (image or video frame) for forensic evidence of AI manipulation "
        "or deepfake generation.\n"
        "Look for inconsistencies in lighting, shadows, anatomical details (hands, eyes, teeth), "
        "and pixel-level artifacts.\n"
        "Provide a percentage likelihood of AI generation."
    )


def offer_deep_prompt(job_text: str) -> str:
    return (
        "Analyze this job offer text for scam indicators. Thoroughly reason about the compensation, "
        "language, and request patterns.\n\n"
        f'Job Text: "{job_text}"'
    )


def offer_grounded_prompt(job_text: str) -> str:
    return (
        "Verify this job offer. Check if the company exists and if the offer details align with "
        "standard practices for that company.\n"
        f'Job Text: "{job_text}"'
    )


def offer_format_prompt(analysis: str) -> str:
    return (
        "Extract the verdict and details from this analysis text into JSON.\n"
        f'Analysis: "{analysis}"'
    )


def claim_grounded_prompt(claim: str) -> str:
    return (
        "Verify this claim using Google Search. Determine if it is REAL, FAKE, or MISLEADING.\n"
        f'Claim: "{claim}"'
    )


def claim_format_prompt(analysis: str) -> str:
    return (
        "Based on this verification text, extract the verdict and a factual summary/correction.\n"
        f'Text: "{analysis}"'
    )
