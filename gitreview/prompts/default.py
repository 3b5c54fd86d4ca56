"""Default review template.

A general-purpose review covering correctness, design, readability and tests.
"""

REVIEW_TEMPLATE_DEFAULT = """Review the following git diff and provide a concise, actionable code review.

Cover, where relevant:
- Bugs and correctness issues (logic errors, edge cases, error handling)
- Design and maintainability (naming, structure, duplication)
- Readability and style
- Missing or insufficient tests
{focus_instructions}{ignore_instructions}

Format the review as short sections separated by blank lines:
1. A one-paragraph summary of the change.
2. Issues found, most important first, each with the file and a suggested fix.
3. Optional minor suggestions.

If the change looks good, say so briefly instead of inventing issues.

GIT DIFF:
{diff}"""
