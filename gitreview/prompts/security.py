"""Security review template."""

REVIEW_TEMPLATE_SECURITY = """Perform a security review of the following git diff.

Look for:
- Injection (SQL, shell, template, path traversal)
- Authentication and authorization mistakes
- Secrets, tokens or credentials committed to the code
- Unsafe deserialization and unvalidated input
- Insecure cryptography or randomness
- Sensitive data written to logs or error messages
- Vulnerable dependency changes
{focus_instructions}{ignore_instructions}

For each finding give: severity (critical, high, medium, low), the file,
what an attacker could do, and a concrete fix. Separate findings with blank lines.
If no security issues are present, state that clearly.

GIT DIFF:
{diff}"""
