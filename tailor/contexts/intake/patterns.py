"""
Reusable word lists and constants for job description keyword extraction.

This module provides the fixed vocabularies used across the intake context:
- Stopwords (English function words plus job-posting boilerplate)
- Technical phrases boosted as single keywords
- Role nouns used to recognize job titles

All entries are lowercase. Lists are tuples so iteration order is fixed.
"""

# =============================================================================
# STOPWORDS
# =============================================================================

# Articles, prepositions, pronouns, auxiliary verbs and connectives
ENGLISH_STOPWORDS = (
    # Articles and determiners
    "a", "an", "the", "this", "that", "these", "those", "each", "every", "any",
    "some", "all", "both", "either", "neither", "such", "other", "another",
    # Prepositions
    "about", "above", "across", "after", "against", "along", "among", "around",
    "at", "before", "behind", "below", "beneath", "beside", "between", "beyond",
    "by", "down", "during", "except", "for", "from", "in", "inside", "into",
    "like", "near", "of", "off", "on", "onto", "out", "outside", "over", "per",
    "since", "through", "throughout", "to", "toward", "towards", "under",
    "until", "up", "upon", "via", "with", "within", "without",
    # Pronouns
    "i", "me", "my", "mine", "we", "us", "our", "ours", "you", "your", "yours",
    "he", "him", "his", "she", "her", "hers", "it", "its", "they", "them",
    "their", "theirs", "who", "whom", "whose", "which", "what", "yourself",
    "ourselves", "themselves", "itself",
    # Auxiliary and modal verbs
    "am", "is", "are", "was", "were", "be", "been", "being", "have", "has",
    "had", "having", "do", "does", "did", "doing", "will", "would", "shall",
    "should", "can", "could", "may", "might", "must", "ought",
    # Connectives and generic adverbs
    "and", "or", "but", "nor", "so", "yet", "if", "then", "than", "because",
    "while", "whereas", "although", "though", "unless", "whether", "as",
    "also", "too", "very", "just", "only", "not", "no", "more", "most", "less",
    "least", "well", "how", "when", "where", "why", "here", "there", "again",
    "etc", "eg", "ie", "including", "include", "includes", "within", "able",
)

# Words that appear in nearly every posting and carry no signal
JOB_POSTING_STOPWORDS = (
    "seeking", "looking", "hiring", "join", "joining", "ideal", "candidate",
    "candidates", "role", "position", "opportunity", "responsibilities",
    "requirements", "qualifications", "preferred", "required", "plus",
    "strong", "excellent", "ability", "skills", "years", "year", "experience",
    "experienced", "knowledge", "understanding", "familiarity", "proficiency",
    "proficient", "demonstrated", "proven", "equivalent", "degree", "related",
    "field", "company", "apply", "benefits", "salary", "new", "highly",
    "great", "good", "etc", "team", "teams", "work", "working",
)

STOPWORDS = ENGLISH_STOPWORDS + JOB_POSTING_STOPWORDS


# =============================================================================
# TECHNICAL PHRASES
# =============================================================================

# Multi-word phrases counted as their own keyword with boosted weight
TECH_PHRASES = (
    "machine learning",
    "deep learning",
    "reinforcement learning",
    "computer vision",
    "natural language processing",
    "large language models",
    "data science",
    "data engineering",
    "data pipelines",
    "data warehouse",
    "data analysis",
    "data visualization",
    "feature engineering",
    "distributed systems",
    "cloud infrastructure",
    "infrastructure as code",
    "continuous integration",
    "continuous deployment",
    "test automation",
    "unit testing",
    "version control",
    "web development",
    "full stack",
    "front end",
    "back end",
    "rest apis",
    "microservices architecture",
    "event driven",
    "real time",
    "site reliability",
    "incident response",
    "project management",
    "product management",
    "user experience",
    "user research",
    "a/b testing",
    "time series",
    "big data",
    "mobile development",
    "embedded systems",
)


# =============================================================================
# ROLE NOUNS
# =============================================================================

# Head nouns of job titles; a role phrase is one of these preceded by modifiers
ROLE_NOUNS = (
    "engineer",
    "developer",
    "scientist",
    "analyst",
    "manager",
    "designer",
    "architect",
    "administrator",
    "consultant",
    "specialist",
    "researcher",
    "director",
    "programmer",
    "technician",
    "coordinator",
    "strategist",
    "lead",
    "intern",
    "officer",
    "accountant",
    "writer",
    "editor",
)

# Maximum number of modifier tokens in front of a role noun
MAX_ROLE_MODIFIERS = 2
