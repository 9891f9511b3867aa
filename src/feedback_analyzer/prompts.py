"""
Prompt templates for single and bulk feedback analysis

Each prompt embeds a literal example of the JSON shape the reply must follow.
"""

SINGLE_ANALYSIS_PROMPT = """Analyze this customer feedback quickly and concisely:

"{feedback}"

Respond with JSON only:
{{
    "sentiment": {{
        "overall": "Positive|Negative|Mixed|Neutral",
        "positive": number,
        "negative": number,
        "neutral": number
    }},
    "issues": [
        {{
            "category": "Bug|Feature|Support|Performance|UI|Positive",
            "description": "Brief description",
            "priority": "high|medium|low",
            "severity": "critical|major|minor"
        }}
    ],
    "actionItems": [
        "Action 1",
        "Action 2"
    ],
    "summary": "One sentence summary"
}}

Keep descriptions under 15 words. Make percentages add to 100."""


BULK_ANALYSIS_PROMPT = """Analyze this bulk customer feedback and provide comprehensive aggregate insights.

DATASET INFO:
- Total feedback entries: {total_entries}
- Sample size analyzed: {sample_size}
- Detected feedback columns: {column_names}

FEEDBACK SAMPLE:
{sample_text}

Respond with JSON only:
{{
    "aggregateSentiment": {{
        "overall": "Positive|Negative|Mixed|Neutral",
        "positive": 30,
        "negative": 50,
        "neutral": 20
    }},
    "issueCategories": [
        {{
            "category": "Bug Reports",
            "description": "Technical issues and app crashes",
            "priority": "high",
            "severity": "critical",
            "frequency": 15
        }},
        {{
            "category": "Feature Requests",
            "description": "Users requesting new functionality",
            "priority": "medium",
            "severity": "minor",
            "frequency": 8
        }}
    ],
    "strategicRecommendations": [
        "Address critical stability issues affecting 60% of users",
        "Prioritize mobile app performance improvements",
        "Implement user-requested export functionality"
    ],
    "executiveSummary": "Analysis of {total_entries} feedback entries reveals critical performance issues requiring immediate attention, with users particularly frustrated by app crashes and slow response times.",
    "priorityBreakdown": {{
        "high": 5,
        "medium": 8,
        "low": 3
    }}
}}

Focus on:
1. Identifying the most common issues and their frequency
2. Categorizing feedback into actionable themes
3. Providing specific, concrete recommendations
4. Highlighting urgent vs. nice-to-have improvements
5. Make percentages add to 100 exactly"""


def build_single_prompt(feedback: str) -> str:
    return SINGLE_ANALYSIS_PROMPT.format(feedback=feedback)


def build_bulk_prompt(sample_text: str, total_entries: int, sample_size: int, column_names) -> str:
    return BULK_ANALYSIS_PROMPT.format(
        total_entries=total_entries,
        sample_size=sample_size,
        column_names=', '.join(column_names),
        sample_text=sample_text
    )
