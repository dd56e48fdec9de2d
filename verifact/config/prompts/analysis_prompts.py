"""Prompt templates for the model-backed credibility probes.

Each template is filled with a probe-specific slice of the article text.
The credibility template asks for fixed uppercase section labels so the
response formatter can turn the answer into subheadings and bullet points.
"""

FACT_CHECKER_SYSTEM_PROMPT = (
    "You are a fact-checking expert. Provide clear, bullet-pointed analysis "
    "of news credibility."
)

CREDIBILITY_PROMPT = '''Analyze this news content for credibility. Format your response as follows:

CREDIBILITY RATING: [HIGH/MEDIUM/LOW]

KEY FINDINGS:
• [Main credibility indicator 1]
• [Main credibility indicator 2]
• [Main credibility indicator 3]

SOURCE ANALYSIS:
• [Source reliability assessment]
• [Publication type and reputation]

CONTENT QUALITY:
• [Factual evidence assessment]
• [Language and bias indicators]
• [Verification status]

RECOMMENDATION: [Brief recommendation]

Content: {content}'''


BIAS_PROMPT = '''Analyze the political bias of this content. Rate as LEFT, CENTER-LEFT, CENTER, CENTER-RIGHT, or RIGHT and explain why:

{content}'''


FACT_OPINION_PROMPT = '''Separate facts from opinions in this content. List FACTS and OPINIONS separately:

{content}'''


SENTIMENT_PROMPT = '''Analyze the emotional manipulation in this headline and content. Rate sentiment and identify manipulation tactics:

Headline: {headline}
Content: {content}'''


KEY_POINTS_PROMPT = '''Extract the main claims and key points from this article as bullet points:

{content}'''


RELATED_SEARCH_PROMPT = '''Based on this article content, suggest 3-5 search terms to find related coverage from other news sources:

{content}'''


TRANSLATION_PROMPT = '''Translate the following text from {source_language} to {target_language}. Return only the translation, without commentary:

{text}'''
