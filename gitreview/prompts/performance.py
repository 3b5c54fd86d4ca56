"""Performance review template."""

REVIEW_TEMPLATE_PERFORMANCE = """Perform a performance review of the following git diff.

Look for:
- Algorithmic complexity problems and unnecessary work in loops
- Repeated I/O, N+1 queries, missing batching or caching
- Excessive memory allocation or copying of large data
- Blocking calls on hot paths
- Resource leaks (files, connections, handles)
{focus_instructions}{ignore_instructions}

For each finding give the file, the expected impact, and a concrete
improvement. Separate findings with blank lines.
If the change has no meaningful performance impact, say so briefly.

GIT DIFF:
{diff}"""
