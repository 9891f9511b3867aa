"""
Configuration for Feedback Extractor
Keyword vocabulary for column detection and sampling limits
"""

# Keywords to look for when identifying free-text feedback columns
# Matched against lower-cased, letters-only header names
FEEDBACK_KEYWORDS = [
    'feedback',
    'comment',
    'review',
    'text',
    'message',
    'description',
    'note',
    'remarks',
    'opinion',
    'thoughts',
    'experience',
    'issue',
    'complaint',
    'suggestion',
    'recommendation',
    'testimonial',
]

# Only the first N data rows (header excluded) are ever examined
MAX_SCAN_ROWS = 50

# At most N entries are joined into the text sent to the model
MAX_SAMPLE_ENTRIES = 25

# Values of this length or shorter are not considered feedback
MIN_FEEDBACK_LENGTH = 10

# Joins the surviving column values of one row
ENTRY_SEPARATOR = " | "

# Joins entries in the submitted sample text
SAMPLE_SEPARATOR = "\n\n---FEEDBACK---\n\n"
